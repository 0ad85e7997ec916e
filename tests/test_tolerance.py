"""Tests for approximate floating-point equality."""

import math

import numpy as np
import pytest

from unitassert import DOUBLE, SINGLE, AssertionFailed, approx_equal, not_approx_equal
from unitassert.assertions.tolerance import precision_of

f32 = np.float32


# --- precision selection ---


def test_python_floats_use_double_precision():
    assert precision_of(1.0, 1.0, None) is DOUBLE


def test_float32_operand_selects_single_precision():
    assert precision_of(f32(1.0), 1.0, None) is SINGLE
    assert precision_of(1.0, 1.0, f32(0.1)) is SINGLE


def test_default_deltas_per_precision():
    assert SINGLE.default_delta == f32(1e-5)
    assert isinstance(SINGLE.default_delta, np.float32)
    assert DOUBLE.default_delta == 1e-15


# --- single precision ---


def test_approx_equal_single_default_delta():
    approx_equal(f32(1), f32(1.0000001))
    with pytest.raises(AssertionFailed):
        approx_equal(f32(1), f32(1.01))


def test_not_approx_equal_single_default_delta():
    not_approx_equal(f32(1), f32(1.05))
    with pytest.raises(AssertionFailed):
        not_approx_equal(f32(1), f32(1.000001))


def test_approx_equal_single_custom_delta():
    approx_equal(f32(1.0), f32(1.005), f32(0.01))
    with pytest.raises(AssertionFailed):
        approx_equal(f32(1.0), f32(1.02), delta=f32(0.01))


def test_not_approx_equal_single_custom_delta():
    not_approx_equal(f32(1.0), f32(1.02), delta=f32(0.01))
    with pytest.raises(AssertionFailed):
        not_approx_equal(f32(1.0), f32(1.005), delta=f32(0.01))


# --- double precision ---


def test_approx_equal_double_default_delta():
    approx_equal(1.0, 1.000000000000001)
    with pytest.raises(AssertionFailed):
        approx_equal(1.0, 1.1)


def test_not_approx_equal_double_default_delta():
    not_approx_equal(1.0, 1.1)
    with pytest.raises(AssertionFailed):
        not_approx_equal(1.0, 1.000000000000001)


def test_approx_equal_double_custom_delta():
    approx_equal(1.0, 1.0000000001, delta=1e-8)
    with pytest.raises(AssertionFailed):
        approx_equal(1.0, 1.0000001, delta=1e-8)


def test_not_approx_equal_double_custom_delta():
    not_approx_equal(1.0, 1.0000001, delta=1e-8)
    with pytest.raises(AssertionFailed):
        not_approx_equal(1.0, 1.0000000001, delta=1e-8)


def test_default_double_delta_is_tight():
    approx_equal(0.3, 0.1 + 0.2)
    with pytest.raises(AssertionFailed):
        approx_equal(1.0, 1.0 + 1e-14)
    approx_equal(1.0, 1.0 + 1e-14, delta=1e-9)


# --- boundaries ---


def test_boundary_is_inclusive():
    approx_equal(1.0, 1.5, delta=0.5)
    approx_equal(1.0, 0.5, delta=0.5)
    with pytest.raises(AssertionFailed):
        not_approx_equal(1.0, 1.5, delta=0.5)


def test_just_outside_boundary_fails():
    with pytest.raises(AssertionFailed):
        approx_equal(1.0, 1.5 + 2**-20, delta=0.5)


def test_zero_delta_is_exact_equality():
    approx_equal(2.0, 2.0, delta=0.0)
    with pytest.raises(AssertionFailed):
        approx_equal(2.0, 2.0 + 2**-40, delta=0.0)


def test_negative_delta_is_empty_range():
    with pytest.raises(AssertionFailed):
        approx_equal(1.0, 1.0, delta=-0.1)
    not_approx_equal(1.0, 1.0, delta=-0.1)


def test_nan_is_never_approximately_equal():
    with pytest.raises(AssertionFailed):
        approx_equal(1.0, math.nan, delta=10.0)
    not_approx_equal(1.0, math.nan, delta=10.0)


def test_failure_reported_through_range_check():
    with pytest.raises(AssertionFailed) as exc_info:
        approx_equal(1.0, 2.0, delta=0.5)
    result = exc_info.value.result
    assert result.name == "in_range"
    assert result.operands == {"value": 2.0, "low": 0.5, "high": 1.5}
