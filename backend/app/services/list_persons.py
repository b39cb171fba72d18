"""ListPersons — full scan of the PersonRepository.

Invariants:
    - Returns every stored Person; an empty store yields [] (never None)
    - Order is whatever the store returns
"""

from app.core.person import Person
from app.core.repository_protocols import PersonRepository


class ListPersons:
    """Return all persisted persons."""

    def __init__(self, repo: PersonRepository):
        self.repo = repo

    async def execute(self) -> list[Person]:
        return await self.repo.get_all()
