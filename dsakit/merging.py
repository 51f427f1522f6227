"""Merging two sorted lists without extra space, and merging intervals."""

from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any

__all__ = ["merge_sorted_in_place", "merge_intervals"]


def merge_sorted_in_place(first: MutableSequence[Any], second: MutableSequence[Any]) -> None:
    """Rearrange two sorted lists in place so that together they read in order.

    Afterwards ``first`` holds the smallest ``len(first)`` values and
    ``second`` the rest, each sorted. Uses the shell-sort gap method.
    """
    split = len(first)
    total = split + len(second)

    def locate(index: int) -> tuple[MutableSequence[Any], int]:
        return (first, index) if index < split else (second, index - split)

    gap = (total + 1) // 2
    while gap > 0:
        for left in range(total - gap):
            left_seq, li = locate(left)
            right_seq, ri = locate(left + gap)
            if left_seq[li] > right_seq[ri]:
                left_seq[li], right_seq[ri] = right_seq[ri], left_seq[li]
        if gap == 1:
            break
        gap = (gap + 1) // 2


def merge_intervals(intervals: Iterable[Sequence[Any]]) -> list[tuple[Any, Any]]:
    """Merge overlapping or touching intervals; return them sorted by start."""
    merged: list[list[Any]] = []
    for start, end in sorted((start, end) for start, end in intervals):
        if not merged or start > merged[-1][1]:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return [(start, end) for start, end in merged]