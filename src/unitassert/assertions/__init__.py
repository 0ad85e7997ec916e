"""Assertion predicates that report pass/fail to a pluggable failure sink."""

from unitassert.assertions.base import AssertionFailed, AssertionResult
from unitassert.assertions.sink import (
    FailureSink,
    PytestSink,
    RaisingSink,
    RecordingSink,
    format_failure,
    get_sink,
    set_default_sink,
    set_sink,
    use_sink,
)
from unitassert.assertions.boolean import false, true
from unitassert.assertions.collection import (
    contains,
    count_equals,
    count_not_equals,
    does_not_contain,
    is_empty,
    is_not_empty,
)
from unitassert.assertions.equality import (
    equal,
    fail,
    is_not_type,
    is_type,
    not_equal,
    not_null,
    not_same,
    null,
    same,
    throws,
)
from unitassert.assertions.ordering import (
    Comparable,
    compare,
    greater_than,
    greater_than_or_equal,
    in_range,
    less_than,
    less_than_or_equal,
    not_in_range,
)
from unitassert.assertions.strings import ends_with, starts_with
from unitassert.assertions.tolerance import DOUBLE, SINGLE, Precision, approx_equal, not_approx_equal

__all__ = [
    "AssertionFailed",
    "AssertionResult",
    "FailureSink",
    "PytestSink",
    "RaisingSink",
    "RecordingSink",
    "format_failure",
    "get_sink",
    "set_default_sink",
    "set_sink",
    "use_sink",
    "equal",
    "not_equal",
    "null",
    "not_null",
    "same",
    "not_same",
    "is_type",
    "is_not_type",
    "throws",
    "fail",
    "approx_equal",
    "not_approx_equal",
    "Precision",
    "SINGLE",
    "DOUBLE",
    "true",
    "false",
    "Comparable",
    "compare",
    "greater_than",
    "less_than",
    "greater_than_or_equal",
    "less_than_or_equal",
    "in_range",
    "not_in_range",
    "starts_with",
    "ends_with",
    "is_empty",
    "is_not_empty",
    "contains",
    "does_not_contain",
    "count_equals",
    "count_not_equals",
]
