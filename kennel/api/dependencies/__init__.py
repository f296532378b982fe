"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_database(), get_db(), DbSession
- Services: get_dog_service()

Usage:
======
    from kennel.api.dependencies import DbSession

    @router.get("/dogs")
    async def list_dogs(db: DbSession):
        ...
"""

from kennel.api.dependencies.database import (
    get_database,
    get_db,
    DbSession,
)
from kennel.api.dependencies.services import get_dog_service

__all__ = [
    # Database
    "get_database",
    "get_db",
    "DbSession",
    # Services
    "get_dog_service",
]
