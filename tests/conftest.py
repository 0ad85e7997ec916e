"""Pytest configuration and fixtures."""

import logging

import pytest

from unitassert import RecordingSink, set_default_sink, set_sink, use_sink


@pytest.fixture(autouse=True)
def reset_sink_and_loggers():
    """Restore the default sink and detach unitassert log handlers after each test."""
    yield

    set_sink(None)
    set_default_sink(None)

    # Module loggers hold references to these objects, so they are reset, not deleted.
    names = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("unitassert")
    ]

    for name in names:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


@pytest.fixture
def recorder():
    """RecordingSink installed for the duration of the test."""
    with use_sink(RecordingSink()) as sink:
        yield sink
