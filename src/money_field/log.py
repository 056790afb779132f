"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

import structlog

_log_stream: TextIO | None = None


def setup_logging(log_level: str = "WARNING", log_file: str | Path | None = None) -> None:
    """Configure structlog with key/value output.

    Logs go to *log_file* when given, otherwise to stderr, so that they
    never draw over the terminal UI.  Should be called once at startup;
    a file opened by an earlier call is closed first.
    """
    global _log_stream
    close_logging()
    if log_file:
        _log_stream = open(log_file, "a", encoding="utf-8")
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.WARNING)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=_log_stream or sys.stderr),
    )


def close_logging() -> None:
    """Close the log file opened by :func:`setup_logging`, if any.

    Later log calls go to stderr.
    """
    global _log_stream
    if _log_stream is None:
        return
    structlog.configure(logger_factory=structlog.PrintLoggerFactory(file=sys.stderr))
    _log_stream.close()
    _log_stream = None


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a bound logger for the given component *name*."""
    return structlog.get_logger(name)
