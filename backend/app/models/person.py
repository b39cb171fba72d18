"""Person ORM — persists Person entities in the `persons` table.

Invariants:
    - id is UUID primary key with NO default: ids come from CreatePerson, never the store
    - name is non-nullable text, unbounded length
    - birth_date is a DATE column (no time-of-day component)

Design Decisions:
    - No secondary indexes: lookups are by primary key or full scan only
"""

import uuid
from datetime import date

from sqlalchemy import Text, Date
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class PersonModel(Base):
    """Person row — one per created Person, never updated or deleted."""
    __tablename__ = "persons"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
