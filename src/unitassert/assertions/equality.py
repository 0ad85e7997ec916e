"""Equality, identity, type and exception checks."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from unitassert.assertions.sink import report

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseException)


def equal(expected: Any, actual: Any) -> None:
    """Pass iff ``expected == actual``. ``None`` equals ``None``."""
    report("equal", expected == actual, expected=expected, actual=actual)


def not_equal(not_expected: Any, actual: Any) -> None:
    report("not_equal", not (not_expected == actual), not_expected=not_expected, actual=actual)


def null(value: Any) -> None:
    report("null", value is None, value=value)


def not_null(value: Any) -> None:
    report("not_null", value is not None, value=value)


def same(expected: Any, actual: Any) -> None:
    """Pass iff both names refer to one object, regardless of equality."""
    report("same", expected is actual, expected=expected, actual=actual)


def not_same(expected: Any, actual: Any) -> None:
    report("not_same", expected is not actual, expected=expected, actual=actual)


def is_type(expected_type: type | tuple[type, ...], value: Any) -> None:
    """Pass iff *value* is an instance of *expected_type* or one of its subclasses."""
    report("is_type", isinstance(value, expected_type), expected_type=expected_type, value=value)


def is_not_type(expected_type: type | tuple[type, ...], value: Any) -> None:
    report("is_not_type", not isinstance(value, expected_type), expected_type=expected_type, value=value)


def throws(expected_type: type[E], action: Callable[..., Any], *args: Any, **kwargs: Any) -> E | None:
    """Call *action* and pass iff it raises *expected_type* (or a subclass).

    The matching exception is consumed and returned so the caller can
    inspect it. No exception, or one of another type, is reported as a
    failure. Exceptions outside ``Exception`` (KeyboardInterrupt,
    SystemExit) propagate unless *expected_type* names them.
    """
    try:
        action(*args, **kwargs)
    except BaseException as e:
        passed = isinstance(e, expected_type)
        if not passed and not isinstance(e, Exception):
            raise
        logger.debug(f"throws: action raised {type(e).__name__}, expected {expected_type!r}")
        report("throws", passed, expected_type=expected_type, raised=type(e))
        return e if passed else None
    report("throws", False, expected_type=expected_type, raised=None)
    return None


def fail() -> None:
    """Unconditionally report a failure, e.g. from a branch that must not run."""
    report("fail", False)
