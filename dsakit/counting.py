"""Finding duplicated, missing and majority values in integer sequences."""

from collections.abc import Iterable, Sequence
from typing import Any, Optional

__all__ = [
    "find_duplicate",
    "find_repeating_and_missing",
    "majority_element",
    "majority_elements",
]


def find_duplicate(values: Sequence[int]) -> int:
    """Return the repeated value among ``n + 1`` integers drawn from ``1..n``.

    Uses Floyd's tortoise-and-hare cycle detection, treating each value as
    the index of the next node, so the input is left untouched.
    """
    if not values:
        raise ValueError("find_duplicate() of an empty sequence")
    slow = fast = values[0]
    while True:
        slow = values[slow]
        fast = values[values[fast]]
        if slow == fast:
            break
    fast = values[0]
    while slow != fast:
        slow = values[slow]
        fast = values[fast]
    return slow


def find_repeating_and_missing(values: Iterable[int]) -> tuple[int, int]:
    """Return ``(repeating, missing)`` for a list meant to hold ``1..n`` once each.

    One value appears twice and one value of ``1..n`` is absent; both are
    recovered with XOR arithmetic.
    """
    items = list(values)
    if not items:
        raise ValueError("find_repeating_and_missing() of an empty sequence")
    expected = range(1, len(items) + 1)

    combined = 0
    for value in (*items, *expected):
        combined ^= value

    # Lowest set bit tells the repeating and missing values apart.
    mask = combined & -combined
    one = zero = 0
    for value in (*items, *expected):
        if value & mask:
            one ^= value
        else:
            zero ^= value

    if items.count(zero) == 2:
        return zero, one
    return one, zero


def majority_element(values: Iterable[Any]) -> Optional[Any]:
    """Return the value occurring more than ``n // 2`` times, or None.

    Uses the Boyer-Moore voting algorithm followed by a verifying count.
    """
    items = list(values)
    count = 0
    candidate: Optional[Any] = None
    for value in items:
        if count == 0:
            count = 1
            candidate = value
        elif value == candidate:
            count += 1
        else:
            count -= 1

    if count and items.count(candidate) > len(items) // 2:
        return candidate
    return None


def majority_elements(values: Iterable[Any]) -> list:
    """Return every value occurring more than ``n // 3`` times (at most two).

    Uses the extended Boyer-Moore voting algorithm; candidates are reported
    in the order the vote settled on them.
    """
    items = list(values)
    first: Optional[Any] = None
    second: Optional[Any] = None
    first_count = second_count = 0
    first_set = second_set = False

    for value in items:
        if first_count == 0 and not (second_set and value == second):
            first, first_count, first_set = value, 1, True
        elif second_count == 0 and not (first_set and value == first):
            second, second_count, second_set = value, 1, True
        elif first_set and value == first:
            first_count += 1
        elif second_set and value == second:
            second_count += 1
        else:
            first_count -= 1
            second_count -= 1

    threshold = len(items) // 3 + 1
    result = []
    if first_set and items.count(first) >= threshold:
        result.append(first)
    if second_set and items.count(second) >= threshold:
        result.append(second)
    return result