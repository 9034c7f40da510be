"""Structured logging configuration."""

import logging
import sys

import structlog

from weather_console.core.config import LogLevel, settings


def configure_logging(level: LogLevel | None = None, json_logs: bool | None = None) -> None:
    """Configure structlog for the process.

    Log lines go to stderr so they never interleave with the menu on stdout.

    Args:
        level: Log level name, defaults to ``settings.log_level``
        json_logs: Render JSON instead of console output, defaults to ``settings.log_json``
    """
    level_name = (level or settings.log_level).upper()
    use_json = settings.log_json if json_logs is None else json_logs

    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level_name)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Return a logger bound to ``name``."""
    return structlog.get_logger(name)
