"""SQLAlchemy Person Repository — relational adapter for the PersonRepository protocol.

Invariants:
    - ORM rows (PersonModel) never escape: every read returns core Person entities
    - add() commits before returning; a returned add() means the row is durable
    - Storage failures surface as StorageUnavailableError / ConstraintViolationError
    - get_by_id() returns None for unknown ids (never raises for "not found")

Design Decisions:
    - One AsyncSession per repository instance, owned by the request (get_db)
    - session.get() for lookups: primary-key access, served from identity map when present
    - Core INSERT for add(): a reused id always reaches the store's primary key
      and fails as IntegrityError, even when the row is already in the identity map
"""

import logging

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import PersonId
from app.core.person import Person
from app.infrastructure.database import translate_db_errors
from app.models.person import PersonModel

logger = logging.getLogger(__name__)


def _to_entity(row: PersonModel) -> Person:
    return Person(
        id=PersonId(row.id), name=row.name, birth_date=row.birth_date,
    )


class SqlAlchemyPersonRepository:
    """Person persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, person_id: PersonId) -> Person | None:
        async with translate_db_errors(self.db, "get_by_id"):
            row = await self.db.get(PersonModel, person_id)
        return _to_entity(row) if row else None

    async def get_all(self) -> list[Person]:
        async with translate_db_errors(self.db, "get_all"):
            result = await self.db.execute(select(PersonModel))
            rows = result.scalars().all()
        return [_to_entity(row) for row in rows]

    async def add(self, person: Person) -> None:
        async with translate_db_errors(self.db, "add"):
            await self.db.execute(
                insert(PersonModel).values(
                    id=person.id, name=person.name, birth_date=person.birth_date,
                ),
            )
            await self.db.commit()
        logger.debug(
            f"Person {person.id} persisted", extra={"person_id": str(person.id)},
        )
