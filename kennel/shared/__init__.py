"""
Shared Module

Contains the layers below the HTTP surface:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database engine and sessions
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── migrations/     ← Alembic environment and revisions
    └── utils/          ← Utilities

Usage:
======
    from kennel.shared.models import Dog
    from kennel.shared.repositories import DogRepository
    from kennel.shared.services import DogService
    from kennel.shared.core import logger, KennelException
"""
