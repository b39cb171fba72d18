"""Dependency Providers — wire session → repository → use case per request.

Invariants:
    - One AsyncSession per request (get_db); every use case in a request shares it
    - Routes depend on use cases only, never on adapters or sessions directly

Design Decisions:
    - Plain functions with Depends over a DI container: FastAPI caches per request
    - Overriding get_person_repository swaps the adapter for the whole API (tests)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.repository_protocols import PersonRepository
from app.infrastructure.database import get_db
from app.infrastructure.person_repository import SqlAlchemyPersonRepository
from app.services.create_person import CreatePerson
from app.services.get_person_by_id import GetPersonById
from app.services.list_persons import ListPersons


def get_person_repository(
    db: AsyncSession = Depends(get_db),
) -> PersonRepository:
    return SqlAlchemyPersonRepository(db)


def get_create_person(
    repo: PersonRepository = Depends(get_person_repository),
) -> CreatePerson:
    return CreatePerson(repo)


def get_get_person_by_id(
    repo: PersonRepository = Depends(get_person_repository),
) -> GetPersonById:
    return GetPersonById(repo)


def get_list_persons(
    repo: PersonRepository = Depends(get_person_repository),
) -> ListPersons:
    return ListPersons(repo)
