"""Structured logging setup using structlog."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date
from decimal import Decimal
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from tour_pricing.core.config import get_settings


def render_money_values(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Render Decimal and date values as plain strings ('41.67', '2024-01-10')."""
    for key, value in event_dict.items():
        if isinstance(value, Decimal):
            event_dict[key] = str(value)
        elif isinstance(value, date):
            event_dict[key] = value.isoformat()
    return event_dict


def setup_logging(debug: bool | None = None, log_level: str | None = None) -> None:
    """
    Configure structlog for the pricing engine.

    In debug mode: Pretty console output with colors
    Otherwise: JSON output for log aggregators

    Args:
        debug: Pretty console output; defaults to settings.debug
        log_level: Logging level name; defaults to settings.log_level
    """
    settings = get_settings()
    if debug is None:
        debug = settings.debug
    if log_level is None:
        log_level = settings.log_level

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    # Note: Don't use add_logger_name with PrintLoggerFactory
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        render_money_values,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger instance."""
    return structlog.get_logger(name)


@contextmanager
def bound_context(**kwargs: Any) -> Iterator[None]:
    """
    Attach key/value pairs to every event logged inside the block.

    Earlier values for the same keys are restored on exit, so nested
    quotations do not leak context into the caller.

    Example:
        >>> with bound_context(service_date="2024-01-15"):
        ...     select_rate_by_date(rates, target)  # rate_selected carries service_date
    """
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield
