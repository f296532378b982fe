"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    KennelException (base)
       │
       ├── InvalidIdError (400)         ← Path id is not a number
       ├── ValidationError (400)        ← Request body failed validation
       ├── NotFoundError (404)          ← Resource not found
       │      └── DogNotFoundError
       └── InternalServerError (500)    ← Store failure while writing

Response Bodies:
================
Each exception renders its own JSON body through to_dict():

    InvalidIdError       → {"message": "id should be a number"}
    ValidationError      → {"errors": ["name should be a string", ...]}
    DogNotFoundError     → {"message": "Dog not found"}
    InternalServerError  → {"error": "Internal server error"}

Usage:
======
    from kennel.shared.core.exceptions import DogNotFoundError

    raise DogNotFoundError(dog_id)
"""

from typing import Any, Optional


class KennelException(Exception):
    """
    Base exception for all Kennel application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code, used in logs
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary for the JSON response body
        """
        return {"message": self.message}


# ═══════════════════════════════════════════════════════════════════════════════
# CLIENT INPUT ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class InvalidIdError(KennelException):
    """Path identifier could not be read as a number (400 Bad Request)."""

    def __init__(self, message: str = "id should be a number") -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="INVALID_ID",
        )


class ValidationError(KennelException):
    """
    Validation error (400 Bad Request).

    Carries every problem found in a request body, not just the first one.

    Example:
        raise ValidationError(["'foo' is not a valid key", "age should be a number"])
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(
            message="Validation failed",
            status_code=400,
            error_code="VALIDATION_ERROR",
        )

    def to_dict(self) -> dict[str, Any]:
        return {"errors": self.errors}


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(KennelException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("Dog", 7)
        # Message: "Dog not found"
    """

    def __init__(self, resource: str, resource_id: Any = None) -> None:
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            message=f"{resource} not found",
            status_code=404,
            error_code="NOT_FOUND",
        )


class DogNotFoundError(NotFoundError):
    """Dog not found error."""

    def __init__(self, dog_id: Any = None) -> None:
        super().__init__(resource="Dog", resource_id=dog_id)


# ═══════════════════════════════════════════════════════════════════════════════
# SERVER ERRORS (500)
# ═══════════════════════════════════════════════════════════════════════════════


class InternalServerError(KennelException):
    """Unexpected failure that must not leak details to the client."""

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="INTERNAL_ERROR",
        )

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}
