"""Collection checks: emptiness, membership and element count.

``contains`` and ``does_not_contain`` also cover strings. When the value
under test is a ``str`` they check for a substring, otherwise for a member.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Any, TypeVar

from unitassert.assertions.sink import report
from unitassert.assertions.strings import contains_substring, does_not_contain_substring

T = TypeVar("T")


def is_empty(collection: Collection[Any]) -> None:
    report("is_empty", len(collection) == 0, collection=collection)


def is_not_empty(collection: Collection[Any]) -> None:
    report("is_not_empty", len(collection) != 0, collection=collection)


def contains(item: T | str, collection: Collection[T] | str) -> None:
    if isinstance(collection, str):
        contains_substring(item, collection)
        return
    report("contains", item in collection, item=item, collection=collection)


def does_not_contain(item: T | str, collection: Collection[T] | str) -> None:
    if isinstance(collection, str):
        does_not_contain_substring(item, collection)
        return
    report("does_not_contain", item not in collection, item=item, collection=collection)


def count_equals(expected_count: int, collection: Collection[Any]) -> None:
    count = len(collection)
    report("count_equals", count == expected_count, expected_count=expected_count, count=count)


def count_not_equals(expected_count: int, collection: Collection[Any]) -> None:
    count = len(collection)
    report("count_not_equals", count != expected_count, expected_count=expected_count, count=count)
