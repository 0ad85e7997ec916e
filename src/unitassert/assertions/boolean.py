"""Boolean checks. Only real booleans pass; truthy values are not coerced."""

from __future__ import annotations

import numpy as np

from unitassert.assertions.sink import report

_BOOL_TYPES = (bool, np.bool_)


def true(condition: bool) -> None:
    report("true", isinstance(condition, _BOOL_TYPES) and bool(condition), condition=condition)


def false(condition: bool) -> None:
    report("false", isinstance(condition, _BOOL_TYPES) and not bool(condition), condition=condition)
