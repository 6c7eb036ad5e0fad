"""
Structured logging configuration using structlog.

Library modules only call get_logger(); applications embedding vgsuppress
call configure_logging() once at startup.
"""

import logging
import sys
from typing import Any

import structlog

from vgsuppress.shared.infrastructure.config import Settings, get_settings


def configure_logging(stream: Any = sys.stderr, config: Settings | None = None) -> None:
    """
    Configure structlog for the application.

    Sets up:
    - Pretty console output for development
    - JSON output for production, or whenever log_json is set
    - Log level from settings

    Args:
        stream: Stream the stdlib handler writes to
        config: Settings to use (default: get_settings())
    """
    config = config or get_settings()

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if config.log_json or config.is_production:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=getattr(logging, config.log_level.upper()),
        force=True,
    )


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("suppressions_parsed", count=3)
    """
    return structlog.get_logger(name)
