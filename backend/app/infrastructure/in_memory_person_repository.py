"""In-Memory Person Repository — dict-backed adapter for the PersonRepository protocol.

Invariants:
    - Keyed by PersonId; duplicate ids rejected with ConstraintViolationError
    - get_all() returns a fresh list (callers cannot mutate the store through it)

Design Decisions:
    - No locking: every method completes without awaiting, so it is atomic on the event loop
"""

from app.core.domain_types import PersonId
from app.core.errors import ConstraintViolationError
from app.core.person import Person


class InMemoryPersonRepository:
    """Person persistence in a process-local dict."""

    def __init__(self, persons: list[Person] | None = None):
        self._persons: dict[PersonId, Person] = {
            p.id: p for p in persons or []
        }

    async def get_by_id(self, person_id: PersonId) -> Person | None:
        return self._persons.get(person_id)

    async def get_all(self) -> list[Person]:
        return list(self._persons.values())

    async def add(self, person: Person) -> None:
        if person.id in self._persons:
            raise ConstraintViolationError(
                f"duplicate id {person.id}", "add",
            )
        self._persons[person.id] = person
