"""
Structured logging for gcal: structlog events rendered by stdlib handlers.

Modules log through ``get_logger(__name__)`` with an event name and key/value
fields. ``setup_logging`` decides level and rendering (console, or JSON lines
when GCAL_LOG_FORMAT=json). Everything goes to stderr so stdout stays
reserved for the event table.

Usage:
    from gcal.logging_config import get_logger, setup_logging

    logger = get_logger(__name__)
    setup_logging("debug")
    logger.debug("range_resolved", start="2024-03-01", end="2024-03-10")
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

DEFAULT_LEVEL = "WARNING"

SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]


def configure_structlog() -> None:
    """Route structlog events into stdlib logging.

    Runs on first ``get_logger`` call, so events logged before
    ``setup_logging`` still reach stdlib instead of being printed to stdout.
    """
    structlog.configure(
        processors=[
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def resolve_level(level: str | None) -> int:
    if level is None:
        level = os.environ.get("GCAL_LOG_LEVEL", DEFAULT_LEVEL)
    return getattr(logging, level.upper(), logging.WARNING)


def setup_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """Install the stderr handler on the root logger.

    ``None`` for either argument defers to GCAL_LOG_LEVEL / GCAL_LOG_FORMAT.
    """
    if json_output is None:
        json_output = os.environ.get("GCAL_LOG_FORMAT", "").lower() == "json"

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    configure_structlog()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    ))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    if not structlog.is_configured():
        configure_structlog()
    return structlog.get_logger(name)


__all__ = ["DEFAULT_LEVEL", "configure_structlog", "get_logger", "resolve_level", "setup_logging"]
