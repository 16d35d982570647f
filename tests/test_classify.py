import pytest

from arraykit.classify import (
    NumberKind,
    is_abundant,
    is_armstrong,
    is_automorphic,
    is_composite,
    is_deficient,
    is_disarium,
    is_duck,
    is_even,
    is_harshad,
    is_odd,
    is_palindrome,
    is_perfect,
    is_prime,
    is_spy,
    is_strong,
    select,
)


@pytest.mark.parametrize("num", [0, 1, 153, 370, 371, 407])
def test_documented_armstrong_numbers(num):
    assert is_armstrong(num) is True


def test_armstrong_rejects_neighbours():
    assert is_armstrong(152) is False
    assert is_armstrong(154) is False


@pytest.mark.parametrize("num", [3210, 8050896, 70709])
def test_documented_duck_numbers(num):
    assert is_duck(num) is True


def test_duck_requires_a_zero_digit():
    assert is_duck(123456789) is False
    assert is_duck(0) is False
    assert is_duck(-10) is False


def test_documented_palindrome():
    assert is_palindrome(12321) is True
    assert is_palindrome(12341) is False


def test_palindrome_zero_and_negative():
    assert is_palindrome(0) is True
    assert is_palindrome(-121) is False


def test_documented_perfect_number():
    assert is_perfect(6) is True


def test_documented_spy_number():
    assert is_spy(1412) is True
    assert is_spy(1413) is False


def test_spy_rejects_non_positive():
    assert is_spy(0) is False
    assert is_spy(-22) is False


def test_perfect_numbers_below_five_hundred():
    assert select(range(1, 500), NumberKind.PERFECT) == [6, 28, 496]


@pytest.mark.parametrize("num", range(1, 300))
def test_abundant_perfect_deficient_partition(num):
    flags = [is_abundant(num), is_perfect(num), is_deficient(num)]
    assert flags.count(True) == 1


@pytest.mark.parametrize("num", range(-5, 100))
def test_prime_is_complement_of_composite(num):
    assert is_prime(num) is not is_composite(num)


@pytest.mark.parametrize("num", range(-7, 50))
def test_even_and_odd_are_exclusive(num):
    assert is_even(num) is not is_odd(num)


def test_composite_small_values():
    assert [n for n in range(0, 5) if is_composite(n)] == [4]


def test_non_positive_edge_cases():
    assert is_abundant(-4) is True
    assert is_deficient(0) is False
    assert is_perfect(0) is True
    assert is_prime(1) is True
    assert is_strong(0) is True
    assert is_strong(-1) is False
    assert is_armstrong(-153) is False
    assert is_disarium(0) is True
    assert is_automorphic(0) is True
    assert is_automorphic(-5) is False


@pytest.mark.parametrize("num", range(1, 10))
def test_single_digits_are_special_everywhere(num):
    assert is_armstrong(num)
    assert is_disarium(num)
    assert is_harshad(num)
    assert is_palindrome(num)


def test_automorphic_square_ends_with_number():
    for num in select(range(1, 1000), NumberKind.AUTOMORPHIC):
        assert str(num * num).endswith(str(num))
    assert is_automorphic(76) is True
    assert is_automorphic(10) is False


def test_disarium_differs_from_armstrong():
    assert is_disarium(89) is True
    assert is_armstrong(89) is False


def test_strong_number_example():
    assert is_strong(145) is True
    assert is_strong(146) is False


@pytest.mark.parametrize("num", [10, 100, 1000, 20, 50])
def test_harshad_round_numbers(num):
    assert is_harshad(num) is True


@pytest.mark.parametrize("num", [0, -1, -18])
def test_harshad_rejects_non_positive(num):
    with pytest.raises(ValueError):
        is_harshad(num)


def test_select_keeps_order_and_duplicates():
    values = [9, 2, 7, 4, 4, 1]
    assert select(values, NumberKind.EVEN) == [2, 4, 4]
    assert select(values, NumberKind.ODD) == [9, 7, 1]


def test_select_accepts_kind_name():
    values = [153, 10, 370]
    assert select(values, "armstrong") == select(values, NumberKind.ARMSTRONG)
    assert select(values, "armstrong") == [153, 370]


def test_select_unknown_kind():
    with pytest.raises(ValueError):
        select([1, 2], "fibonacci")


def test_select_empty_input():
    assert select([], NumberKind.PRIME) == []


def test_select_result_is_subsequence():
    values = list(range(-3, 60))
    for kind in NumberKind:
        if kind is NumberKind.HARSHAD:
            continue
        chosen = select(values, kind)
        assert all(kind.matches(v) for v in chosen)
        rest = [v for v in values if v not in chosen]
        assert not any(kind.matches(v) for v in rest)


def test_select_harshad_raises_on_zero():
    with pytest.raises(ValueError):
        select([12, 0], NumberKind.HARSHAD)


def test_matches_agrees_with_predicate():
    assert NumberKind.STRONG.matches(145) is is_strong(145)
    assert NumberKind.DUCK.matches(3210) is is_duck(3210)
    assert NumberKind.SPY.matches(1412) is True