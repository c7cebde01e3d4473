"""Structured logging setup."""

from __future__ import annotations

import logging
import sys

import structlog

from stressgen.config.settings import Settings


def configure_logging(settings: Settings) -> None:
    """Configure structlog according to *settings*.

    Safe to call more than once; the last call wins.
    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    renderer: structlog.types.Processor
    if settings.is_json_logging:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
