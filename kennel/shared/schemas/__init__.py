"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema and standard response bodies
- dog: Dog request validation and responses

Usage:
======
    from kennel.shared.schemas.dog import DogCreate, DogResponse, parse_payload
"""

from kennel.shared.schemas.common import (
    BaseSchema,
    MessageResponse,
    ValidationErrorResponse,
    ErrorResponse,
)
from kennel.shared.schemas.dog import (
    DogCreate,
    DogUpdate,
    DogResponse,
    collect_errors,
    parse_payload,
)

__all__ = [
    # Common
    "BaseSchema",
    "MessageResponse",
    "ValidationErrorResponse",
    "ErrorResponse",
    # Dog
    "DogCreate",
    "DogUpdate",
    "DogResponse",
    "collect_errors",
    "parse_payload",
]
