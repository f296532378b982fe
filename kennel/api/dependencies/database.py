"""
Database Dependency

FastAPI dependency for database sessions.

Sessions come from the Database the application was built with
(app.state.database). The session is automatically committed on success
and rolled back on error.

Usage:
======
    from kennel.api.dependencies.database import DbSession

    @router.get("/dogs")
    async def list_dogs(db: DbSession):
        repo = DogRepository(db)
        return await repo.list()
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from kennel.shared.db import Database


def get_database(request: Request) -> Database:
    """The Database attached to the running application."""
    return request.app.state.database


async def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Yields an async database session for the duration of the request.
    The session is automatically:
    - Committed on success
    - Rolled back on exception
    - Closed after the request

    Yields:
        AsyncSession: Database session for the current request
    """
    async with database.session() as session:
        yield session


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
