"""
API Handlers

Route handlers for the Kennel API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses
- Handle HTTP-specific errors

All business logic is delegated to the service layer.
"""

from kennel.api.handlers import (
    dog_handler,
    home_handler,
)

__all__ = [
    "dog_handler",
    "home_handler",
]
