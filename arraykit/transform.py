"""Element-wise transformations and reorderings of integer sequences.

Every function returns a new list and leaves its input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable


def _non_empty(values: Iterable[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("an empty sequence cannot be transformed")
    return items


def _digits(num: int) -> list[int]:
    """Decimal digits of ``num``, least significant first; none unless positive."""
    digits = []
    while num > 0:
        num, digit = divmod(num, 10)
        digits.append(digit)
    return digits


def digit_sum(num: int) -> int:
    """Sum of the decimal digits of ``num``; zero for numbers that are not positive."""
    return sum(_digits(num))


def reverse_digits(num: int) -> int:
    """``num`` with its decimal digits in reverse order; zero unless positive."""
    result = 0
    for digit in _digits(num):
        result = result * 10 + digit
    return result


def cubes(values: Iterable[int]) -> list[int]:
    """Each value cubed. Raises ValueError for an empty sequence."""
    return [value ** 3 for value in _non_empty(values)]


def squares(values: Iterable[int]) -> list[int]:
    """Each value squared. Raises ValueError for an empty sequence."""
    return [value * value for value in _non_empty(values)]


def digit_sums(values: Iterable[int]) -> list[int]:
    """Each value replaced by the sum of its digits.

    Raises ValueError for an empty sequence.
    """
    return [digit_sum(value) for value in _non_empty(values)]


def reversed_numbers(values: Iterable[int]) -> list[int]:
    """Each value replaced by the number formed by reversing its digits."""
    return [reverse_digits(value) for value in values]


def reverse(values: Iterable[int]) -> list[int]:
    """The values in reverse order."""
    return list(values)[::-1]


def rotate_right(values: Iterable[int]) -> list[int]:
    """The values rotated one place to the right: the last becomes the first."""
    items = list(values)
    if not items:
        return items
    return items[-1:] + items[:-1]


def sort_ascending(values: Iterable[int]) -> list[int]:
    """The values sorted from smallest to largest."""
    return sorted(values)


def sort_descending(values: Iterable[int]) -> list[int]:
    """The values sorted from largest to smallest."""
    return sorted(values, reverse=True)


def group_negatives(values: Iterable[int]) -> list[int]:
    """The values ordered so that all negatives come first.

    The grouping is done by sorting, so the result is in ascending order.
    """
    return sorted(values)