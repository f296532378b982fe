"""
Error Handler Middleware

Global exception handling for the API.

Catches exceptions escaping the handlers and converts them to JSON
responses with the same body shapes the handlers use themselves.

Exception Handling:
===================
1. KennelException subclasses → Their status_code and to_dict()
2. FastAPI RequestValidationError → 400 {"errors": [...]}
   (malformed JSON, body that is not an object)
3. Other exceptions → 500 {"error": "Internal server error"} (details hidden)

Usage:
======
    from kennel.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from kennel.shared.core.exceptions import InternalServerError, KennelException
from kennel.shared.core.logging import logger


REQUEST_ERROR_MESSAGES = {
    "json_invalid": "request body should be valid JSON",
    "dict_type": "request body should be an object",
}


def request_error_messages(errors: list[dict[str, Any]]) -> list[str]:
    """Readable messages for FastAPI request validation errors."""
    messages: list[str] = []
    for error in errors:
        message = REQUEST_ERROR_MESSAGES.get(error.get("type", ""), error.get("msg", "invalid request"))
        if message not in messages:
            messages.append(message)
    return messages


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(KennelException)
    async def kennel_exception_handler(
        request: Request,
        exc: KennelException,
    ) -> JSONResponse:
        """Render application exceptions with their own status and body."""
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle requests FastAPI could not parse.

        These occur when the body is not JSON or not a JSON object.
        """
        errors = request_error_messages(list(exc.errors()))
        logger.warning(
            "Request validation error",
            errors=errors,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=400,
            content={"errors": errors},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content=InternalServerError().to_dict(),
        )
