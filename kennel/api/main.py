"""
Kennel API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
    Middleware Stack:   CORS → Error Handlers
    Routers:            Home (/) · Dogs (/dogs)
    Dependencies:       Database (app.state.database) → DogService

Lifecycle:
==========
1. create_application() builds (or receives) the Database
2. Application starts → lifespan startup → database connection verified
3. Tables created when DATABASE_CREATE_TABLES is set
4. Application serves requests
5. Application stops → lifespan shutdown → database connection closed

Usage:
======
    # Run the console script (port 3001 with APP_ENV=test, else 3000)
    kennel-api

    # Or with uvicorn
    uvicorn kennel.api.main:app --port 3000 --reload

    # Or programmatically, with a database of your own
    from kennel.api.main import create_application
    app = create_application(database=Database("sqlite+aiosqlite://"))
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kennel.config.settings import Settings, settings as default_settings
from kennel.shared.db import Database
from kennel.shared.core.logging import logger, setup_logging
from kennel.api.middleware import setup_exception_handlers
from kennel.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Verify the database connection
    - Create tables if configured to

    Shutdown:
    - Close database connections
    """
    app_settings: Settings = app.state.settings
    database: Database = app.state.database

    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting Kennel API",
        app_name=app_settings.APP_NAME,
        version=app_settings.APP_VERSION,
        environment=app_settings.APP_ENV,
    )

    await database.connect()
    if app_settings.DATABASE_CREATE_TABLES:
        await database.create_all()

    logger.info(f"Server ready at: http://localhost:{app_settings.server_port}")

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down Kennel API")

    await database.close()

    logger.info("Kennel API shutdown complete")


def create_application(
    app_settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to build the app with (defaults to the environment)
        database: Store handle to inject (defaults to one built from the settings)

    Returns:
        Configured FastAPI application instance
    """
    app_settings = app_settings or default_settings
    setup_logging(app_settings)

    app = FastAPI(
        title=app_settings.APP_NAME,
        description="CRUD API for Dog records",
        version=app_settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if app_settings.DEBUG else None,
        redoc_url="/redoc" if app_settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.database = database or Database.from_settings(app_settings)

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    uvicorn.run(
        "kennel.api.main:app",
        host=default_settings.HOST,
        port=default_settings.server_port,
        reload=default_settings.is_development and default_settings.DEBUG,
    )


# Create the application instance
app = create_application()
