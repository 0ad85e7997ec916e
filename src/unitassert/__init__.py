"""Compact xUnit-style assertions for Python tests.

    from unitassert import equal, approx_equal, throws

    equal(5, add(2, 3))
    approx_equal(0.3, 0.1 + 0.2, 1e-9)
    throws(ZeroDivisionError, lambda: 1 / 0)
"""

from unitassert.assertions import *  # noqa: F403
from unitassert.assertions import __all__ as _assertions_all
from unitassert.config import AssertConfig, configure, load_config

__version__ = "0.1.0"

__all__ = [*_assertions_all, "AssertConfig", "configure", "load_config"]
