"""Pair and quadruplet sums, and the longest or counted runs in a sequence."""

from collections import Counter
from collections.abc import Iterable
from typing import Any

__all__ = [
    "has_two_sum",
    "four_sum",
    "count_subarrays_with_xor",
    "longest_zero_sum_subarray",
    "longest_consecutive",
    "longest_unique_substring",
]


def has_two_sum(values: Iterable[int], target: int) -> bool:
    """Tell whether two values at different positions add up to ``target``.

    Works on a sorted copy with two pointers; the input is not modified.
    """
    items = sorted(values)
    left, right = 0, len(items) - 1
    while left < right:
        total = items[left] + items[right]
        if total == target:
            return True
        if total < target:
            left += 1
        else:
            right -= 1
    return False


def four_sum(values: Iterable[int], target: int) -> list[tuple[int, int, int, int]]:
    """Return every distinct quadruplet of values that sums to ``target``.

    Each quadruplet is in ascending order and the quadruplets come in
    ascending lexicographic order. The input is not modified.
    """
    nums = sorted(values)
    size = len(nums)
    found: list[tuple[int, int, int, int]] = []
    for i in range(size):
        if i > 0 and nums[i] == nums[i - 1]:
            continue
        for j in range(i + 1, size):
            if j > i + 1 and nums[j] == nums[j - 1]:
                continue
            k, last = j + 1, size - 1
            while k < last:
                total = nums[i] + nums[j] + nums[k] + nums[last]
                if total == target:
                    found.append((nums[i], nums[j], nums[k], nums[last]))
                    k += 1
                    last -= 1
                    while k < last and nums[k] == nums[k - 1]:
                        k += 1
                    while k < last and nums[last] == nums[last + 1]:
                        last -= 1
                elif total < target:
                    k += 1
                else:
                    last -= 1
    return found


def count_subarrays_with_xor(values: Iterable[int], k: int) -> int:
    """Count the contiguous subarrays whose elements XOR to ``k``."""
    prefix_counts: Counter[int] = Counter({0: 1})
    running = 0
    count = 0
    for value in values:
        running ^= value
        count += prefix_counts[running ^ k]
        prefix_counts[running] += 1
    return count


def longest_zero_sum_subarray(values: Iterable[int]) -> int:
    """Return the length of the longest contiguous subarray summing to zero."""
    first_seen: dict[int, int] = {}
    best = 0
    running = 0
    for index, value in enumerate(values):
        running += value
        if running == 0:
            best = index + 1
        elif running in first_seen:
            best = max(best, index - first_seen[running])
        else:
            first_seen[running] = index
    return best


def longest_consecutive(values: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers present."""
    present = set(values)
    best = 0
    for start in present:
        if start - 1 in present:
            continue
        end = start
        while end + 1 in present:
            end += 1
        best = max(best, end - start + 1)
    return best


def longest_unique_substring(text: str) -> int:
    """Return the length of the longest substring with no repeated character."""
    last_seen: dict[Any, int] = {}
    left = 0
    best = 0
    for right, char in enumerate(text):
        if char in last_seen:
            left = max(last_seen[char] + 1, left)
        last_seen[char] = right
        best = max(best, right - left + 1)
    return best