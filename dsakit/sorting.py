"""Classic comparison sorts and the three-way partition of 0s, 1s and 2s.

Every function accepts any iterable and returns a new sorted list; the
input is never modified.
"""

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = [
    "bubble_sort",
    "insertion_sort",
    "selection_sort",
    "merge_sort",
    "quick_sort",
    "recursive_bubble_sort",
    "recursive_insertion_sort",
    "sort_zero_one_two",
]


def bubble_sort(values: Iterable[Any]) -> list:
    """Sort by repeatedly bubbling the largest remaining item to the end."""
    items = list(values)
    for last in range(len(items) - 1, 0, -1):
        for j in range(last):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[Any]) -> list:
    """Sort by sliding each item left into its place among the sorted prefix."""
    items = list(values)
    for i in range(len(items)):
        j = i
        while j > 0 and items[j - 1] > items[j]:
            items[j - 1], items[j] = items[j], items[j - 1]
            j -= 1
    return items


def selection_sort(values: Iterable[Any]) -> list:
    """Sort by selecting the minimum of the unsorted suffix at each step."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = i
        for j in range(i, len(items)):
            if items[j] <= items[smallest]:
                smallest = j
        items[smallest], items[i] = items[i], items[smallest]
    return items


def _merge(left: list, right: list) -> Iterator[Any]:
    """Yield the items of two sorted lists in order, left first on ties."""
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            yield left[li]
            li += 1
        else:
            yield right[ri]
            ri += 1
    yield from left[li:]
    yield from right[ri:]


def merge_sort(values: Iterable[Any]) -> list:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return list(_merge(merge_sort(items[:middle]), merge_sort(items[middle:])))


def _partition(items: list, low: int, high: int) -> int:
    """Partition items[low..high] around items[low]; return the pivot's index."""
    pivot = items[low]
    i, j = low, high
    while i < j:
        while items[i] <= pivot and i <= high - 1:
            i += 1
        while items[j] > pivot and j >= low + 1:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def _quick_sort_range(items: list, low: int, high: int) -> None:
    if low < high:
        pivot_index = _partition(items, low, high)
        _quick_sort_range(items, low, pivot_index - 1)
        _quick_sort_range(items, pivot_index + 1, high)


def quick_sort(values: Iterable[Any]) -> list:
    """Quick sort using the first item of each range as the pivot."""
    items = list(values)
    _quick_sort_range(items, 0, len(items) - 1)
    return items


def _bubble_prefix(items: list, size: int) -> None:
    if size <= 1:
        return
    swapped = False
    for j in range(size - 1):
        if items[j] > items[j + 1]:
            items[j], items[j + 1] = items[j + 1], items[j]
            swapped = True
    if swapped:
        _bubble_prefix(items, size - 1)


def recursive_bubble_sort(values: Iterable[Any]) -> list:
    """Bubble sort expressed recursively; stops early once a pass makes no swap."""
    items = list(values)
    _bubble_prefix(items, len(items))
    return items


def _insert_from(items: list, start: int) -> None:
    if start >= len(items):
        return
    j = start
    while j > 0 and items[j - 1] > items[j]:
        items[j - 1], items[j] = items[j], items[j - 1]
        j -= 1
    _insert_from(items, start + 1)


def recursive_insertion_sort(values: Iterable[Any]) -> list:
    """Insertion sort expressed recursively over the growing sorted prefix."""
    items = list(values)
    _insert_from(items, 0)
    return items


def sort_zero_one_two(values: Iterable[int]) -> list:
    """Sort a sequence of 0s, 1s and 2s in a single pass (Dutch national flag).

    Any value other than 0 or 1 is treated as belonging to the final group.
    """
    items = list(values)
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items