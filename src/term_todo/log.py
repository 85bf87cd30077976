"""Logging setup.

The curses session owns stdout, so log lines go to stderr or, when
configured, to a file.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

import structlog

_log_stream: Optional[TextIO] = None


def configure_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """Configure structlog to render key/value lines at ``level`` and above."""
    global _log_stream

    if _log_stream is not None:
        _log_stream.close()
        _log_stream = None
    if log_file:
        _log_stream = open(log_file, "a", encoding="utf-8")
    stream = _log_stream or sys.stderr

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.WARNING)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )


def close_logging() -> None:
    """Close the log file, if one is open, and log to stderr from then on."""
    if _log_stream is not None:
        configure_logging()
