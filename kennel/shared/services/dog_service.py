"""
Dog Service

Business logic for Dog records.

Service Pattern:
================
    Handler → DogService → DogRepository → Database

Store Failures:
===============
Errors raised by the store are handled per operation:

    list_dogs     → propagate (global handler answers 500)
    get_dog       → treated as "not found"
    create_dog    → InternalServerError (500)
    update_dog    → treated as "not found"
    delete_dog    → treated as "not found"

Whenever a store error is handled here the session is rolled back, so the
request-scoped commit that follows runs on a clean transaction.

Usage:
======
    from kennel.shared.services.dog_service import DogService

    service = DogService(db)
    dog = await service.create_dog({"name": "Rex", "breed": "Lab", "description": "Friendly", "age": 3})
"""

from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from kennel.shared.core.exceptions import DogNotFoundError, InternalServerError
from kennel.shared.core.logging import get_logger
from kennel.shared.models.dog import Dog
from kennel.shared.repositories.dog_repository import DogRepository
from kennel.shared.schemas.dog import DogCreate, DogResponse, DogUpdate, parse_payload


logger = get_logger(__name__)


class DogService:
    """
    Service for Dog business logic.

    Attributes:
        session: Database session
        repo: DogRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = DogRepository(session)

    async def _store_failed(self, action: str, dog_id: Optional[int], error: SQLAlchemyError) -> None:
        logger.warning("Dog store operation failed", action=action, dog_id=dog_id, error=str(error))
        await self.session.rollback()

    async def list_dogs(self) -> list[DogResponse]:
        """Every Dog in the store."""
        dogs = await self.repo.list()
        return [DogResponse.model_validate(dog) for dog in dogs]

    async def get_dog(self, dog_id: int) -> DogResponse:
        """
        Get one Dog.

        Raises:
            DogNotFoundError: If no Dog has this id or the lookup failed
        """
        dog: Optional[Dog] = None
        try:
            dog = await self.repo.get(dog_id)
        except SQLAlchemyError as e:
            await self._store_failed("get", dog_id, e)

        if dog is None:
            raise DogNotFoundError(dog_id)
        return DogResponse.model_validate(dog)

    async def create_dog(self, payload: dict[str, Any]) -> DogResponse:
        """
        Validate a body and create a Dog from it.

        Raises:
            ValidationError: If the body is invalid
            InternalServerError: If the store rejects the insert
        """
        data = parse_payload(DogCreate, payload)

        try:
            dog = await self.repo.create(**data.model_dump())
        except SQLAlchemyError as e:
            logger.error("Dog create failed", error=str(e), exc_info=True)
            await self.session.rollback()
            raise InternalServerError() from e

        logger.info("Dog created", dog_id=dog.id)
        return DogResponse.model_validate(dog)

    async def update_dog(self, dog_id: Optional[int], payload: dict[str, Any]) -> DogResponse:
        """
        Validate a partial body and apply it to a Dog.

        The body is validated before the id is looked at, so a bad body is
        reported even when the Dog does not exist.

        Args:
            dog_id: Target id, None when the path id can never match a record
            payload: Raw request body

        Raises:
            ValidationError: If the body is invalid
            DogNotFoundError: If no Dog has this id or the update failed
        """
        changes = parse_payload(DogUpdate, payload).changes()

        dog: Optional[Dog] = None
        if dog_id is not None:
            try:
                dog = await self.repo.update(dog_id, **changes)
            except SQLAlchemyError as e:
                await self._store_failed("update", dog_id, e)

        if dog is None:
            raise DogNotFoundError(dog_id)

        logger.info("Dog updated", dog_id=dog.id, fields=sorted(changes))
        return DogResponse.model_validate(dog)

    async def delete_dog(self, dog_id: int) -> DogResponse:
        """
        Delete a Dog.

        Returns:
            The Dog as it was before deletion

        Raises:
            DogNotFoundError: If no Dog has this id or the delete failed
        """
        dog: Optional[Dog] = None
        try:
            dog = await self.repo.delete(dog_id)
        except SQLAlchemyError as e:
            await self._store_failed("delete", dog_id, e)

        if dog is None:
            raise DogNotFoundError(dog_id)

        logger.info("Dog deleted", dog_id=dog_id)
        return DogResponse.model_validate(dog)
