"""
Base Model Classes

This module provides the declarative base for all SQLAlchemy models in Kennel.

Usage:
======
    from kennel.shared.models.base import Base

    class Dog(Base):
        __tablename__ = "dogs"
        id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
        name: Mapped[str] = mapped_column(Text, nullable=False)
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models in the application should inherit from this class so that
    their tables are registered on Base.metadata (used by create_all() and
    by Alembic autogenerate).
    """
