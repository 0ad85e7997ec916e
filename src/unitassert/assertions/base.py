"""Base data structures for the assertion system."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class AssertionResult:
    """Result of evaluating a single predicate.

    Attributes:
        name: Predicate that produced the result (e.g. "equal").
        passed: Whether the predicate's condition held.
        operands: Operand names mapped to the values the predicate was
            called with, in call order. Sinks use them to build diagnostics.
    """

    name: str
    passed: bool
    operands: dict[str, Any] = field(default_factory=dict)


class AssertionFailed(AssertionError):
    """Raised when a predicate's condition does not hold."""

    def __init__(self, message: str, result: AssertionResult):
        super().__init__(message)
        self.result = result
