"""Unified logging configuration for Misère Nim scripts.

Library modules only create module-level loggers
(``logging.getLogger(__name__)``) and never install handlers. Entry points
call :func:`setup_logging` once to attach console (and optionally file)
output.

Usage:
    from misere_nim.core.logging_config import setup_logging

    logger = setup_logging("run_competition", level="DEBUG")
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

__all__ = [
    "COMPACT_FORMAT",
    "DATE_FORMAT",
    "DEFAULT_FORMAT",
    "DETAILED_FORMAT",
    "get_logger",
    "setup_logging",
]

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
COMPACT_FORMAT = "%(levelname)s: %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed by setup_logging so repeated calls can detect them.
_HANDLER_TAG = "_misere_nim_handler"


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown log level: {level}")
        return value
    return level


def setup_logging(
    name: str | None = None,
    level: int | str = logging.INFO,
    log_dir: str | Path | None = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Configure and return the logger called ``name``.

    Calling this again for the same logger updates its level but does not
    add duplicate handlers.

    Args:
        name: Logger name; ``None`` configures the root logger.
        level: Level as an int or a name such as ``"DEBUG"``.
        log_dir: If given, also write to ``<log_dir>/<name>.log``.
        fmt: Format string for every handler.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_coerce_level(level))

    formatter = logging.Formatter(fmt, datefmt=DATE_FORMAT)
    installed = [h for h in logger.handlers if getattr(h, _HANDLER_TAG, False)]
    if installed:
        for handler in installed:
            handler.setFormatter(formatter)
        return logger

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    setattr(console, _HANDLER_TAG, True)
    logger.addHandler(console)

    if log_dir is not None:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(directory / f"{name or 'misere_nim'}.log")
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_TAG, True)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a module logger without touching handlers."""
    return logging.getLogger(name)
