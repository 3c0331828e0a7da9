"""Structured logging configuration using structlog + rich.

The library itself only logs through the stdlib ``resulttype`` logger and never
configures logging on import. Applications call ``setup_logging()`` once.
"""

import logging
import sys

import structlog
from rich.traceback import install as install_rich_traceback

from resulttype.config import settings


def parse_log_level(log_level: str) -> int:
    """Map a level name (DEBUG, INFO, WARNING, ERROR, CRITICAL) to its number.

    Raises:
        ValueError: unknown level name
    """
    levels = logging.getLevelNamesMapping()
    try:
        return levels[log_level.upper()]
    except KeyError:
        raise ValueError(f"Unknown log level: {log_level!r}") from None


def setup_logging(
    *,
    json_logs: bool | None = None,
    log_level: str | None = None,
    rich_tracebacks: bool | None = None,
) -> None:
    """Configure structlog with console output or JSON formatting.

    Arguments left as None fall back to ``resulttype.config.settings``.

    Args:
        json_logs: If True, output JSON logs (for production). Otherwise, console.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rich_tracebacks: If True, install rich's traceback handler.
    """
    if json_logs is None:
        json_logs = settings.json_logs
    if log_level is None:
        log_level = settings.log_level
    if rich_tracebacks is None:
        rich_tracebacks = settings.rich_tracebacks

    level = parse_log_level(log_level)

    if rich_tracebacks:
        install_rich_traceback(show_locals=True, width=120)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        renderer_processors: list[structlog.types.Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderer_processors = [
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=[*shared_processors, *renderer_processors],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    # Stdlib records, including the library's own "resulttype" logger
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Optional logger name (typically __name__).

    Returns:
        A bound structlog logger.
    """
    return structlog.get_logger(name)
