"""Failure sinks: turn a failed AssertionResult into a test-failure signal."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Protocol

from unitassert.assertions.base import AssertionFailed, AssertionResult

logger = logging.getLogger(__name__)


class FailureSink(Protocol):
    def __call__(self, result: AssertionResult) -> None: ...


def format_failure(result: AssertionResult) -> str:
    """Render a failed result as ``"<name> failed: a=1, b=2"``."""
    if not result.operands:
        return f"{result.name} failed"
    details = ", ".join(f"{key}={value!r}" for key, value in result.operands.items())
    return f"{result.name} failed: {details}"


class RaisingSink:
    """Default sink. Raises AssertionFailed for every failed result."""

    def __call__(self, result: AssertionResult) -> None:
        if not result.passed:
            raise AssertionFailed(format_failure(result), result)


class PytestSink:
    """Reports failures through ``pytest.fail`` so the traceback stays short."""

    def __call__(self, result: AssertionResult) -> None:
        if result.passed:
            return
        import pytest

        pytest.fail(format_failure(result), pytrace=False)


class RecordingSink:
    """Fake sink that records every result and never raises."""

    def __init__(self) -> None:
        self.results: list[AssertionResult] = []

    def __call__(self, result: AssertionResult) -> None:
        self.results.append(result)

    @property
    def failures(self) -> list[AssertionResult]:
        return [r for r in self.results if not r.passed]

    def clear(self) -> None:
        self.results.clear()


DEFAULT_SINK: FailureSink = RaisingSink()

_default_sink: FailureSink = DEFAULT_SINK

# None means "use the process default".
_active_sink: ContextVar[FailureSink | None] = ContextVar("unitassert_sink", default=None)


def get_sink() -> FailureSink:
    sink = _active_sink.get()
    return sink if sink is not None else _default_sink


def set_default_sink(sink: FailureSink | None) -> None:
    """Install *sink* for every thread and task without a context-local override.

    ``None`` restores ``DEFAULT_SINK``.
    """
    global _default_sink
    _default_sink = sink if sink is not None else DEFAULT_SINK


def set_sink(sink: FailureSink | None) -> None:
    """Install *sink* for the current context only. ``None`` falls back to the process default."""
    _active_sink.set(sink)


@contextmanager
def use_sink(sink: FailureSink) -> Iterator[FailureSink]:
    """Temporarily route results to *sink*, restoring the previous one on exit."""
    token = _active_sink.set(sink)
    try:
        yield sink
    finally:
        _active_sink.reset(token)


def report(name: str, passed: bool, **operands) -> None:
    """Forward one predicate evaluation to the active sink."""
    result = AssertionResult(name=name, passed=bool(passed), operands=operands)
    logger.debug(f"{name} passed={result.passed}")
    if not result.passed:
        logger.info(format_failure(result))
    get_sink()(result)
