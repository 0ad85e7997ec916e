"""Ordering checks over any totally ordered type."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from unitassert.assertions.sink import report


class Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Comparable)


def compare(a: T, b: T) -> int | None:
    """Three-way comparison of *a* against *b*.

    Returns -1, 0 or 1, or None when the values are unordered (NaN, or two
    sets where neither contains the other).
    """
    if a < b:
        return -1
    if b < a:
        return 1
    if a == b:
        return 0
    return None


def _within(value: T, low: T, high: T) -> bool:
    lower = compare(value, low)
    upper = compare(value, high)
    return lower is not None and upper is not None and lower >= 0 and upper <= 0


def greater_than(a: T, b: T) -> None:
    order = compare(a, b)
    report("greater_than", order is not None and order > 0, a=a, b=b)


def less_than(a: T, b: T) -> None:
    order = compare(a, b)
    report("less_than", order is not None and order < 0, a=a, b=b)


def greater_than_or_equal(a: T, b: T) -> None:
    order = compare(a, b)
    report("greater_than_or_equal", order is not None and order >= 0, a=a, b=b)


def less_than_or_equal(a: T, b: T) -> None:
    order = compare(a, b)
    report("less_than_or_equal", order is not None and order <= 0, a=a, b=b)


def in_range(value: T, low: T, high: T) -> None:
    """Pass iff ``low <= value <= high``. An inverted range is empty and always fails."""
    report("in_range", _within(value, low, high), value=value, low=low, high=high)


def not_in_range(value: T, low: T, high: T) -> None:
    report("not_in_range", not _within(value, low, high), value=value, low=low, high=high)
