"""Approximate equality for single- and double-precision floats.

Each precision carries its own default delta. Single precision applies when
any operand is a ``numpy.float32`` (or narrower) value; bounds are then
computed in single precision. Plain Python floats use double precision.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from unitassert.assertions.ordering import in_range, not_in_range

_SINGLE_TYPES = (np.float32, np.float16)


@dataclass(frozen=True)
class Precision:
    name: str
    dtype: type
    default_delta: float

    def coerce(self, value: float) -> float:
        return self.dtype(value)


SINGLE = Precision("single", np.float32, np.float32(1e-5))
# Very tight for accumulated error; callers doing arithmetic should pass a delta.
DOUBLE = Precision("double", float, 1e-15)


def precision_of(*values: float | None) -> Precision:
    if any(isinstance(v, _SINGLE_TYPES) for v in values):
        return SINGLE
    return DOUBLE


def _bounds(center: float, actual: float, delta: float | None):
    precision = precision_of(center, actual, delta)
    if delta is None:
        delta = precision.default_delta
    center = precision.coerce(center)
    delta = precision.coerce(delta)
    return precision.coerce(actual), center - delta, center + delta


def approx_equal(expected: float, actual: float, delta: float | None = None) -> None:
    """Pass iff *actual* lies in ``[expected - delta, expected + delta]``."""
    value, low, high = _bounds(expected, actual, delta)
    in_range(value, low, high)


def not_approx_equal(not_expected: float, actual: float, delta: float | None = None) -> None:
    """Pass iff *actual* lies outside ``[not_expected - delta, not_expected + delta]``."""
    value, low, high = _bounds(not_expected, actual, delta)
    not_in_range(value, low, high)
