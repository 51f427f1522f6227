"""Largest, second-smallest and second-largest values, and best single trade."""

from collections.abc import Iterable, Sequence
from typing import Any, NamedTuple, Optional

__all__ = [
    "SecondExtremes",
    "largest",
    "second_smallest",
    "second_largest",
    "second_extremes",
    "max_profit",
]


class SecondExtremes(NamedTuple):
    """The second-smallest and second-largest distinct values of a sequence."""

    smallest: Optional[Any]
    largest: Optional[Any]


def largest(values: Iterable[Any]) -> Any:
    """Return the largest value; raise ValueError when there is none."""
    items = iter(values)
    try:
        best = next(items)
    except StopIteration:
        raise ValueError("largest() of an empty sequence") from None
    for value in items:
        if best < value:
            best = value
    return best


def _require_two(values: Iterable[Any]) -> list:
    items = list(values)
    if len(items) < 2:
        raise ValueError("at least two values are required")
    return items


def second_smallest(values: Iterable[Any]) -> Optional[Any]:
    """Return the second-smallest distinct value in one pass.

    Raises ValueError for fewer than two values; returns None when all
    values are equal.
    """
    smallest: Optional[Any] = None
    second: Optional[Any] = None
    for value in _require_two(values):
        if smallest is None or value < smallest:
            second, smallest = smallest, value
        elif value != smallest and (second is None or value < second):
            second = value
    return second


def second_largest(values: Iterable[Any]) -> Optional[Any]:
    """Return the second-largest distinct value in one pass.

    Raises ValueError for fewer than two values; returns None when all
    values are equal.
    """
    top: Optional[Any] = None
    second: Optional[Any] = None
    for value in _require_two(values):
        if top is None or value > top:
            second, top = top, value
        elif value != top and (second is None or value > second):
            second = value
    return second


def second_extremes(values: Iterable[Any]) -> SecondExtremes:
    """Return both second extremes, found in two passes over the values."""
    items = _require_two(values)
    smallest, top = min(items), max(items)
    return SecondExtremes(
        smallest=min((v for v in items if v != smallest), default=None),
        largest=max((v for v in items if v != top), default=None),
    )


def max_profit(prices: Sequence[float]) -> float:
    """Best profit from one buy followed by one later sell; 0 if none is possible."""
    best = 0
    cheapest: Optional[float] = None
    for price in prices:
        if cheapest is None or price < cheapest:
            cheapest = price
        best = max(best, price - cheapest)
    return best