"""Reductions, counts and whole-sequence checks over integer sequences."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations
from math import prod


def _non_empty(values: Iterable[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("an empty sequence has no such value")
    return items


def average(values: Iterable[int]) -> float:
    """Integer mean of the values, truncated toward zero, as a float.

    Raises ValueError for an empty sequence.
    """
    items = _non_empty(values)
    total = sum(items)
    quotient = abs(total) // len(items)
    return float(quotient if total >= 0 else -quotient)


def product(values: Iterable[int]) -> int:
    """Product of the values. Raises ValueError for an empty sequence."""
    return prod(_non_empty(values))


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a contiguous run of values; zero when every run is negative."""
    best = current = 0
    for value in values:
        current = max(current + value, 0)
        best = max(best, current)
    return best


def sum_even_indices(values: Iterable[int]) -> int:
    """Sum of the values at even positions. Raises ValueError when empty."""
    return sum(_non_empty(values)[::2])


def sum_odd_indices(values: Iterable[int]) -> int:
    """Sum of the values at odd positions. Raises ValueError when empty."""
    return sum(_non_empty(values)[1::2])


def sum_even_values(values: Iterable[int]) -> int:
    """Sum of the values that are even."""
    return sum(value for value in values if value % 2 == 0)


def sum_odd_values(values: Iterable[int]) -> int:
    """Sum of the values that are odd."""
    return sum(value for value in values if value % 2 != 0)


def is_palindromic(values: Iterable[int]) -> bool:
    """Whether the sequence reads the same backwards.

    Raises ValueError for an empty sequence.
    """
    items = _non_empty(values)
    return items == items[::-1]


def count_duplicates(values: Iterable[int]) -> int:
    """Number of positions whose value occurs again later in the sequence."""
    items = list(values)
    return len(items) - len(set(items))


def count_occurrences(values: Iterable[int], target: int) -> int:
    """Number of times ``target`` occurs among the values."""
    return sum(1 for value in values if value == target)


def count_pairs(values: Iterable[int], total: int) -> int:
    """Number of pairs of distinct positions whose values add up to ``total``."""
    return sum(1 for a, b in combinations(list(values), 2) if a + b == total)