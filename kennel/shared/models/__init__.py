"""
Kennel SQLAlchemy Models

Models Overview:
================
- Base: Declarative base class
- Dog: The single persisted record type

Usage:
======
    from kennel.shared.models import Dog

    dog = await repo.get(dog_id)
"""

from kennel.shared.models.base import Base
from kennel.shared.models.dog import Dog

__all__ = [
    "Base",
    "Dog",
]
