"""Ordinal, case-sensitive substring checks."""

from __future__ import annotations

from unitassert.assertions.sink import report


def _require_str(name: str, value: object) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")


def contains_substring(substring: str, actual: str) -> None:
    _require_str("substring", substring)
    report("contains", substring in actual, substring=substring, actual=actual)


def does_not_contain_substring(substring: str, actual: str) -> None:
    _require_str("substring", substring)
    report("does_not_contain", substring not in actual, substring=substring, actual=actual)


def starts_with(prefix: str, actual: str) -> None:
    _require_str("prefix", prefix)
    _require_str("actual", actual)
    report("starts_with", actual.startswith(prefix), prefix=prefix, actual=actual)


def ends_with(suffix: str, actual: str) -> None:
    _require_str("suffix", suffix)
    _require_str("actual", actual)
    report("ends_with", actual.endswith(suffix), suffix=suffix, actual=actual)
