"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys

import structlog

from .config import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL) -> structlog.typing.FilteringBoundLogger:
    """Build the depfs logger with console output on stderr.

    Wraps a private PrintLogger rather than calling structlog.configure, so an
    application embedding depfs keeps its own structlog configuration.
    """
    min_level = getattr(logging, level.upper(), logging.WARNING)

    return structlog.wrap_logger(
        structlog.PrintLogger(file=sys.stderr),
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        logger_name="depfs",
    )


logger: structlog.typing.FilteringBoundLogger = setup_logging()
