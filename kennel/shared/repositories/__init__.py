"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic CRUD operations
         │
         └── DogRepository              ← Dog records

Usage Example:
==============
    from kennel.shared.repositories import DogRepository

    repo = DogRepository(db)
    dog = await repo.create(name="Rex", breed="Lab", description="Friendly", age=3)
"""

from kennel.shared.repositories.base import BaseRepository
from kennel.shared.repositories.dog_repository import DogRepository

__all__ = [
    "BaseRepository",
    "DogRepository",
]
