"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database

Services should:
- Contain business logic and validation
- Handle transactions (via session)
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- DogService: Dog validation, retrieval and persistence

Usage:
======
    from kennel.shared.services import DogService

    service = DogService(db)
    dogs = await service.list_dogs()
"""

from kennel.shared.services.dog_service import DogService

__all__ = [
    "DogService",
]
