"""CreatePerson — mint an identity and persist a new Person.

Invariants:
    - The id is generated here, exactly once per call; callers cannot supply one
    - Not idempotent: identical input produces a new Person with a new id every call
    - No validation beyond types; repository errors propagate unchanged

Design Decisions:
    - id_factory injectable (default uuid4): tests can force collisions without patching
"""

import logging
from typing import Callable
from uuid import UUID, uuid4

from app.core.domain_types import PersonId
from app.core.person import Person
from app.core.repository_protocols import PersonRepository
from app.schemas.person import PersonCreate

logger = logging.getLogger(__name__)


class CreatePerson:
    """Create a Person from a creation request."""

    def __init__(
        self,
        repo: PersonRepository,
        id_factory: Callable[[], UUID] = uuid4,
    ):
        self.repo = repo
        self.id_factory = id_factory

    async def execute(self, request: PersonCreate) -> Person:
        person = Person(
            id=PersonId(self.id_factory()),
            name=request.name,
            birth_date=request.birth_date,
        )
        await self.repo.add(person)
        logger.info(
            f"Person {person.id} created", extra={"person_id": str(person.id)},
        )
        return person
