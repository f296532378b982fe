"""
Dog Repository

Database operations for Dog records. Everything the API needs is covered
by the generic CRUD methods of BaseRepository.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from kennel.shared.models.dog import Dog
from kennel.shared.repositories.base import BaseRepository


class DogRepository(BaseRepository[Dog]):
    """Repository for Dog database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Dog, session)
