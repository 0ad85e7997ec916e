from __future__ import annotations

from enum import Enum
from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

from unitassert.assertions.sink import FailureSink, PytestSink, RaisingSink, set_default_sink


class SinkType(str, Enum):
    RAISE = "raise"
    PYTEST = "pytest"


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    debug_file: str | None = None
    verbose: bool = False

    @field_validator("debug_file")
    @classmethod
    def expand_debug_file(cls, v: str | None) -> str | None:
        """Expand ``${VAR}`` references, failing on any that are unset without a default."""
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(f"debug_file '{v}' references a missing environment variable: {e}")


class AssertConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    sink: SinkType = SinkType.RAISE
    logging: LoggingConfig = LoggingConfig()


_SINKS: dict[SinkType, type] = {
    SinkType.RAISE: RaisingSink,
    SinkType.PYTEST: PytestSink,
}


def load_config(path: Path) -> AssertConfig:
    """Load and validate a config from a YAML file. An empty file means all defaults."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    return AssertConfig(**(raw or {}))


def build_sink(config: AssertConfig) -> FailureSink:
    return _SINKS[config.sink]()


def configure(config: AssertConfig) -> FailureSink:
    """Set up debug logging, then install the configured sink as the process default.

    The debug file receives every record from the ``unitassert`` logger
    namespace. If logging setup fails the previous default sink stays in place.
    """
    from unitassert.verbose import setup_logger

    sink = build_sink(config)

    if config.logging.debug_file:
        setup_logger(
            Path(config.logging.debug_file),
            verbose=config.logging.verbose,
            logger_name="unitassert",
        )

    set_default_sink(sink)
    return sink
