"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per-request, which is fine because:
- Services are stateless (only hold db session reference)
- Each request gets its own db session

Usage:
======
    from kennel.api.dependencies.services import get_dog_service

    @router.get("/dogs")
    async def list_dogs(dog_service: DogService = Depends(get_dog_service)):
        return await dog_service.list_dogs()
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from kennel.api.dependencies.database import get_db
from kennel.shared.services.dog_service import DogService


async def get_dog_service(
    db: AsyncSession = Depends(get_db),
) -> DogService:
    """
    Dependency to get DogService instance.

    Creates a new service instance per request with the request's db session.
    """
    return DogService(db)
