"""Next permutation, Pascal's triangle and lattice-path counting."""

import math
from collections.abc import Iterable
from typing import Any

__all__ = ["next_permutation", "pascal_row", "pascal_triangle", "unique_paths"]


def next_permutation(values: Iterable[Any]) -> list:
    """Return the next lexicographic permutation.

    The last permutation wraps around to the first (ascending order).
    """
    items = list(values)
    pivot = next(
        (i for i in range(len(items) - 2, -1, -1) if items[i] < items[i + 1]),
        None,
    )
    if pivot is None:
        items.reverse()
        return items
    successor = next(
        i for i in range(len(items) - 1, pivot, -1) if items[i] > items[pivot]
    )
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1:] = reversed(items[pivot + 1:])
    return items


def pascal_row(row: int) -> list[int]:
    """Return row number ``row`` (1-based) of Pascal's triangle."""
    if row < 1:
        raise ValueError("row numbers start at 1")
    result = [1]
    value = 1
    for col in range(1, row):
        value = value * (row - col) // col
        result.append(value)
    return result


def pascal_triangle(n: int) -> list[list[int]]:
    """Return the first ``n`` rows of Pascal's triangle."""
    return [pascal_row(row) for row in range(1, n + 1)]


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths across an ``m`` by ``n`` grid of cells."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    return math.comb(m + n - 2, m - 1)