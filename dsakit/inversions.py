"""Counting inversions and reverse pairs with merge sort."""

from collections.abc import Iterable
from typing import Callable

__all__ = ["count_inversions", "count_reverse_pairs"]


def _merge(left: list, right: list) -> list:
    merged = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def _inversion_pairs(left: list, right: list) -> int:
    """Pairs (a in left, b in right) with a > b, both halves sorted."""
    count = 0
    ri = 0
    for value in left:
        while ri < len(right) and right[ri] < value:
            ri += 1
        count += ri
    return count


def _reverse_pairs(left: list, right: list) -> int:
    """Pairs (a in left, b in right) with a > 2 * b, both halves sorted."""
    count = 0
    ri = 0
    for value in left:
        while ri < len(right) and value > 2 * right[ri]:
            ri += 1
        count += ri
    return count


def _sort_and_count(items: list, cross: Callable[[list, list], int]) -> tuple[list, int]:
    if len(items) <= 1:
        return items, 0
    middle = (len(items) + 1) // 2
    left, left_count = _sort_and_count(items[:middle], cross)
    right, right_count = _sort_and_count(items[middle:], cross)
    return _merge(left, right), left_count + right_count + cross(left, right)


def count_inversions(values: Iterable[int]) -> int:
    """Count pairs i < j with values[i] > values[j]."""
    return _sort_and_count(list(values), _inversion_pairs)[1]


def count_reverse_pairs(values: Iterable[int]) -> int:
    """Count pairs i < j with values[i] > 2 * values[j]."""
    return _sort_and_count(list(values), _reverse_pairs)[1]