"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /               → Greeting
    /dogs           → Dog records (CRUD)

Usage:
======
    from kennel.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from kennel.api.handlers import (
    dog_handler,
    home_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Greeting (no prefix, root level)
    app.include_router(
        home_handler.router,
        tags=["Home"],
    )

    # Dog endpoints
    app.include_router(
        dog_handler.router,
        prefix="/dogs",
        tags=["Dogs"],
    )
