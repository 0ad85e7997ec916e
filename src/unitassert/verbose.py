"""Debug logging configuration."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(debug_file: Path, verbose: bool = False, logger_name: str = "unitassert") -> logging.Logger:
    """
    Configure and return a logger for assertion debug output.

    Always writes to debug_file. Also writes to stderr when verbose=True.

    Raises:
        RuntimeError: if a logger with this name already has handlers, which
            would otherwise interleave two runs in one file.
    """
    logger = logging.getLogger(logger_name)

    if logger.handlers:
        raise RuntimeError(f"Logger '{logger_name}' already exists with handlers attached")

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S"
    )

    debug_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(debug_file, mode='a')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger
