"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: Base with common config (from_attributes, populate_by_name)
- MessageResponse: {"message": ...} bodies (greeting, not found, bad id)
- ValidationErrorResponse: {"errors": [...]} bodies
- ErrorResponse: {"error": ...} bodies for server failures
"""

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All response schemas should inherit from this class.
    Provides:
    - from_attributes: Allow creating from ORM models
    - populate_by_name: Allow field population by name or alias
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str


class ValidationErrorResponse(BaseModel):
    """Every problem found in a request, in one response."""

    errors: list[str] = Field(description="Human-readable validation messages")


class ErrorResponse(BaseModel):
    """Generic server error response; details are never exposed."""

    error: str = "Internal server error"
