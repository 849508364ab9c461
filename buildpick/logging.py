"""Logging utilities for buildpick commands."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "buildpick"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the buildpick hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the buildpick logger with stderr output and an optional file sink."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Drop handlers from a previous call so repeated invocations do not duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    # StreamHandler defaults to stderr; stdout carries command results.
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("[buildpick] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
