"""Centralized structlog configuration for pyrobase.

Logs go to a file rather than the terminal because the curses screen owns
stdout while the game runs. The level comes from ``PYROBASE_LOG_LEVEL``
(default WARNING); ``PYROBASE_DEBUG=1`` forces DEBUG.
"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import TextIO

import structlog

__all__ = ["configure_logging", "get_logger", "resolve_log_level"]

_DEFAULT_LEVEL = "WARNING"


def resolve_log_level() -> int:
    """Return the numeric log level requested by the environment."""
    if os.getenv("PYROBASE_DEBUG") == "1":
        return logging.DEBUG
    name = os.getenv("PYROBASE_LOG_LEVEL", _DEFAULT_LEVEL)
    level = getattr(logging, name.upper(), None)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(log_path: Path | None = None) -> TextIO:
    """Configure structlog once at application startup.

    Returns the stream log lines are written to so the caller can close it.
    """
    if log_path is None:
        stream: TextIO = sys.stderr
    else:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        stream = log_path.open("a", encoding="utf-8")

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_log_level()),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )
    return stream


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger instance for ``name``."""
    return structlog.get_logger(name)
