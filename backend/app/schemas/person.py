"""Person Schemas — Pydantic DTOs crossing the HTTP / use-case boundary.

Invariants:
    - PersonCreate never carries an id (extra fields such as "id" are ignored)
    - No validation beyond types: empty name and any calendar date are accepted
    - Wire keys are camelCase (birthDate); snake_case accepted on input

Design Decisions:
    - alias_generator=to_camel over per-field aliases: one rule for every field
    - PersonResponse.from_entity keeps the ORM/entity shape out of route handlers
"""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.core.person import Person


class PersonCreate(BaseModel):
    """Person creation request — name and birth date only."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )

    name: str
    birth_date: date


class PersonResponse(BaseModel):
    """Person response — public-facing person data."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID
    name: str
    birth_date: date

    @classmethod
    def from_entity(cls, person: Person) -> "PersonResponse":
        return cls(id=person.id, name=person.name, birth_date=person.birth_date)
