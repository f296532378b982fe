"""
Base Repository

This module provides a generic base repository with common CRUD operations.
Entity-specific repositories inherit from this class.

What This Provides:
===================
- list()         → Fetch every record (findMany)
- get(id)        → Fetch single record by id (findUnique)
- create()       → Create new record
- update()       → Update existing record
- delete()       → Hard delete record

Generic Type Pattern:
=====================
    class DogRepository(BaseRepository[Dog]):
        pass

    repo = DogRepository(db)
    dog = await repo.get(1)  # Returns Dog, not Any

CRUD Operations Flow:
=====================
    CREATE:  add → flush (INSERT, id assigned) → refresh
    READ:    select(Model).where(...) → scalar_one_or_none()
    UPDATE:  get → setattr → flush (UPDATE) → refresh
    DELETE:  get → session.delete → flush (DELETE)

flush() vs commit():
====================
- flush(): Sends SQL to database but doesn't commit transaction
- commit(): Called by the request-scoped session after the handler completes
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from kennel.shared.models.base import Base


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., Dog)
            session: Async database session from get_db()
        """
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list(self) -> list[ModelType]:
        """
        List every record, ordered by id.

        SQL Generated:
            SELECT * FROM dogs ORDER BY id
        """
        result = await self.session.execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())

    async def get(self, record_id: int) -> Optional[ModelType]:
        """
        Get a single record by its id.

        Args:
            record_id: The id of the record to fetch

        Returns:
            The model instance if found, None otherwise

        SQL Generated:
            SELECT * FROM dogs WHERE id = 1
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance with the store-assigned id

        SQL Generated:
            INSERT INTO dogs (name, breed, description, age)
            VALUES ('Rex', 'Lab', 'Friendly', 3)
        """
        instance = self.model(**kwargs)
        self.session.add(instance)

        # Flush sends the INSERT (but doesn't commit) so the id is assigned
        await self.session.flush()
        await self.session.refresh(instance)

        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def update(
        self,
        record_id: int,
        **kwargs: Any,
    ) -> Optional[ModelType]:
        """
        Update a record by id.

        Only the given fields are written; everything else keeps its value.

        Args:
            record_id: id of the record to update
            **kwargs: Fields to update

        Returns:
            Updated model instance, or None if not found

        SQL Generated:
            UPDATE dogs SET age = 10 WHERE id = 1
        """
        instance = await self.get(record_id)
        if not instance:
            return None

        for field, value in kwargs.items():
            if hasattr(instance, field):
                setattr(instance, field, value)

        await self.session.flush()
        await self.session.refresh(instance)

        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, record_id: int) -> Optional[ModelType]:
        """
        Hard delete a record by id.

        Args:
            record_id: id of the record to delete

        Returns:
            The deleted instance (detached, attributes still loaded),
            or None if not found

        SQL Generated:
            DELETE FROM dogs WHERE id = 1
        """
        instance = await self.get(record_id)
        if not instance:
            return None

        await self.session.delete(instance)
        await self.session.flush()
        return instance
