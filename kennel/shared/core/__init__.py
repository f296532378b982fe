"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from kennel.shared.core.logging import logger, get_logger
    from kennel.shared.core.exceptions import KennelException, DogNotFoundError

    logger.info("Starting operation", dog_id=dog_id)
"""

from kennel.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from kennel.shared.core.exceptions import (
    KennelException,
    InvalidIdError,
    ValidationError,
    NotFoundError,
    DogNotFoundError,
    InternalServerError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "KennelException",
    "InvalidIdError",
    "ValidationError",
    "NotFoundError",
    "DogNotFoundError",
    "InternalServerError",
]
