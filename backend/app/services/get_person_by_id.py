"""GetPersonById — single-step lookup over the PersonRepository."""

from app.core.domain_types import PersonId
from app.core.person import Person
from app.core.repository_protocols import PersonRepository


class GetPersonById:
    """Return the Person with the given id, or None when none exists."""

    def __init__(self, repo: PersonRepository):
        self.repo = repo

    async def execute(self, person_id: PersonId) -> Person | None:
        return await self.repo.get_by_id(person_id)
