"""
Logging Configuration

Structured logging setup using structlog for consistent, parseable logs.

Log Output:
===========
Development:
    2024-01-15 10:30:00 [info     ] Dog created                    dog_id=7

Production / Test (JSON):
    {"timestamp": "2024-01-15T10:30:00", "level": "info", "event": "Dog created", "dog_id": 7}

Usage:
======
    from kennel.shared.core.logging import logger, get_logger, log_context

    # Basic logging
    logger.info("Dog created", dog_id=dog.id)

    # Get named logger
    db_logger = get_logger("database")
    db_logger.debug("Query executed", sql=sql)

    # Add context to all subsequent logs
    log_context(request_id=request_id)
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.typing import Processor

from kennel.config.settings import Settings, settings as default_settings


def setup_logging(app_settings: Optional[Settings] = None) -> None:
    """
    Configure structured logging for the application.

    Sets up structlog with:
    - Development: Colored console output for readability
    - Everything else: JSON output for log aggregation systems

    Called automatically when this module is imported, and again by the
    application factory with the settings the app was built with.
    """
    app_settings = app_settings or default_settings

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, app_settings.LOG_LEVEL.upper()),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if app_settings.is_development:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, defaults to module name if not specified

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Add context variables to all subsequent log calls.

    Context is stored in context variables and automatically included
    in all log messages until cleared.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()


# Initialize logging on module import
setup_logging()

# Default logger instance for convenient import
logger = get_logger("kennel")
