"""
Dog Entity Model

The only record type persisted by Kennel.

SAMPLE DOG RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id           │ 1                                                             │
│ name         │ "Rex"                                                         │
│ breed        │ "Lab"                                                         │
│ description  │ "Friendly"                                                    │
│ age          │ 3                                                             │
└──────────────────────────────────────────────────────────────────────────────┘

Every data column is NOT NULL: partial updates only touch the fields
they carry and never null out the others.
"""

from sqlalchemy import Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from kennel.shared.models.base import Base


class Dog(Base):
    """
    Dog model.

    Attributes:
        id: Store-assigned integer identifier (immutable)
        name: Dog's name
        breed: Breed description
        description: Free-form description
        age: Age in years (any finite number)
    """

    __tablename__ = "dogs"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # DATA FIELDS
    # ═══════════════════════════════════════════════════════════════════════════

    name: Mapped[str] = mapped_column(Text, nullable=False)

    breed: Mapped[str] = mapped_column(Text, nullable=False)

    description: Mapped[str] = mapped_column(Text, nullable=False)

    age: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Dog(id={self.id}, name={self.name}, breed={self.breed})>"
