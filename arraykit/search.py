"""Lookups over integer sequences: positions, extremes and ranked values."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def _non_empty(values: Iterable[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("an empty sequence has no such element")
    return items


def index_of(values: Iterable[int], target: int) -> int | None:
    """Position of the first occurrence of ``target``, or None when absent."""
    return next((i for i, value in enumerate(values) if value == target), None)


def find_min(values: Iterable[int]) -> int:
    """Smallest of the values. Raises ValueError for an empty sequence."""
    return min(_non_empty(values))


def find_peak(values: Iterable[int]) -> int:
    """Index of a peak: an element no smaller than its neighbours.

    Uses a binary search, so with several peaks the one found is the one
    the halving reaches first. Raises ValueError for an empty sequence.
    """
    items = _non_empty(values)
    last = len(items) - 1
    low, high = 0, last
    while True:
        mid = (low + high) // 2
        left_ok = mid == 0 or items[mid - 1] <= items[mid]
        right_ok = mid == last or items[mid + 1] <= items[mid]
        if left_ok and right_ok:
            return mid
        if mid > 0 and items[mid - 1] > items[mid]:
            high = mid - 1
        else:
            low = mid + 1


def first_unique_index(values: Iterable[int]) -> int | None:
    """Index of the first value that occurs only once, or None if there is none."""
    items = list(values)
    counts = Counter(items)
    return next((i for i, value in enumerate(items) if counts[value] == 1), None)


def _nth_distinct(values: Iterable[int], n: int, *, largest: bool) -> int:
    if n < 1:
        raise ValueError(f"rank must be at least 1, got {n}")
    distinct = sorted(set(values), reverse=largest)
    if n > len(distinct):
        raise ValueError(
            f"rank {n} exceeds the {len(distinct)} distinct values available"
        )
    return distinct[n - 1]


def nth_maximum(values: Iterable[int], n: int) -> int:
    """The ``n``-th largest distinct value, counting from 1.

    Raises ValueError when ``n`` is below 1 or there are too few distinct values.
    """
    return _nth_distinct(values, n, largest=True)


def nth_minimum(values: Iterable[int], n: int) -> int:
    """The ``n``-th smallest distinct value, counting from 1.

    Raises ValueError when ``n`` is below 1 or there are too few distinct values.
    """
    return _nth_distinct(values, n, largest=False)


def delete_first(values: Iterable[int], target: int) -> list[int]:
    """The values without the first occurrence of ``target``.

    When ``target`` does not occur, the values are returned unchanged.
    """
    items = list(values)
    position = index_of(items, target)
    if position is not None:
        del items[position]
    return items