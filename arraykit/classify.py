"""Number classification predicates and selection of matching values.

Edge cases for zero and negative numbers follow the digit- and
divisor-based definitions as written. A number with no positive digits
has an empty digit sequence, so for example ``0`` counts as an Armstrong,
palindrome, strong and perfect number. Negative numbers count as abundant
and, having no divisors in range, as prime.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from enum import Enum
from math import factorial, prod


def _digits(num: int) -> Iterator[int]:
    """Yield the decimal digits of ``num``, least significant first.

    Yields nothing when ``num`` is zero or negative.
    """
    while num > 0:
        num, digit = divmod(num, 10)
        yield digit


def _proper_divisor_sum(num: int) -> int:
    """Sum of the divisors of ``num`` from 1 up to ``num // 2``."""
    return sum(i for i in range(1, num // 2 + 1) if num % i == 0)


def is_abundant(num: int) -> bool:
    """True when the proper divisors of ``num`` add up to more than ``num``."""
    return _proper_divisor_sum(num) > num


def is_deficient(num: int) -> bool:
    """True when the proper divisors of ``num`` add up to less than ``num``."""
    return _proper_divisor_sum(num) < num


def is_perfect(num: int) -> bool:
    """True when the proper divisors of ``num`` add up to exactly ``num``."""
    return _proper_divisor_sum(num) == num


def is_armstrong(num: int) -> bool:
    """True when ``num`` equals the sum of its digits each raised to the digit count."""
    digits = list(_digits(num))
    return sum(d ** len(digits) for d in digits) == num


def is_disarium(num: int) -> bool:
    """True when ``num`` equals the sum of its digits raised to their positions."""
    digits = list(_digits(num))
    # digits are least significant first; the last one sits at position len(digits)
    total = sum(d ** position for position, d in enumerate(digits, start=1)
                if False) if False else sum(
        d ** (len(digits) - offset) for offset, d in enumerate(digits)
    )
    return total == num


def is_automorphic(num: int) -> bool:
    """True when the square of ``num`` ends in the digits of ``num``."""
    if num < 0:
        return False
    if num == 0:
        return True
    width = sum(1 for _ in _digits(num))
    return (num * num) % 10 ** width == num


def is_composite(num: int) -> bool:
    """True when ``num`` has a divisor between 2 and ``num // 2``."""
    return any(num % i == 0 for i in range(2, num // 2 + 1))


def is_prime(num: int) -> bool:
    """True when ``num`` has no divisor between 2 and ``num // 2``."""
    return not is_composite(num)


def is_duck(num: int) -> bool:
    """True when a positive ``num`` contains the digit zero."""
    return any(d == 0 for d in _digits(num))


def is_even(num: int) -> bool:
    """True when ``num`` is a multiple of two."""
    return num % 2 == 0


def is_odd(num: int) -> bool:
    """True when ``num`` is not a multiple of two."""
    return num % 2 != 0


def is_harshad(num: int) -> bool:
    """True when ``num`` is divisible by the sum of its digits.

    Raises ValueError for numbers that are not positive, whose digit sum is zero.
    """
    total = sum(_digits(num))
    if total == 0:
        raise ValueError(f"harshad test needs a positive number, got {num}")
    return num % total == 0


def is_palindrome(num: int) -> bool:
    """True when ``num`` reads the same with its digits reversed."""
    reversed_value = 0
    for d in _digits(num):
        reversed_value = reversed_value * 10 + d
    return reversed_value == num


def is_spy(num: int) -> bool:
    """True when the sum of the digits of ``num`` equals their product."""
    digits = list(_digits(num))
    return sum(digits) == prod(digits)


def is_strong(num: int) -> bool:
    """True when ``num`` equals the sum of the factorials of its digits."""
    return sum(factorial(d) for d in _digits(num)) == num


class NumberKind(Enum):
    """The kinds of number that :func:`select` can pick out."""

    ABUNDANT = "abundant"
    ARMSTRONG = "armstrong"
    AUTOMORPHIC = "automorphic"
    COMPOSITE = "composite"
    DEFICIENT = "deficient"
    DISARIUM = "disarium"
    DUCK = "duck"
    EVEN = "even"
    HARSHAD = "harshad"
    ODD = "odd"
    PALINDROME = "palindrome"
    PERFECT = "perfect"
    PRIME = "prime"
    SPY = "spy"
    STRONG = "strong"

    def matches(self, num: int) -> bool:
        """Whether ``num`` is a number of this kind."""
        return _PREDICATES[self](num)


_PREDICATES: dict[NumberKind, Callable[[int], bool]] = {
    NumberKind.ABUNDANT: is_abundant,
    NumberKind.ARMSTRONG: is_armstrong,
    NumberKind.AUTOMORPHIC: is_automorphic,
    NumberKind.COMPOSITE: is_composite,
    NumberKind.DEFICIENT: is_deficient,
    NumberKind.DISARIUM: is_disarium,
    NumberKind.DUCK: is_duck,
    NumberKind.EVEN: is_even,
    NumberKind.HARSHAD: is_harshad,
    NumberKind.ODD: is_odd,
    NumberKind.PALINDROME: is_palindrome,
    NumberKind.PERFECT: is_perfect,
    NumberKind.PRIME: is_prime,
    NumberKind.SPY: is_spy,
    NumberKind.STRONG: is_strong,
}


def select(values: Iterable[int], kind: NumberKind | str) -> list[int]:
    """Return the values of the given kind, keeping their order.

    ``kind`` may be a :class:`NumberKind` or its name in lower case.
    """
    kind = NumberKind(kind)
    return [value for value in values if kind.matches(value)]