"""Person Routes — HTTP boundary for the Person use cases.

Invariants:
    - POST returns 201 with the created person and a Location header
    - GET by id maps an absent result to ResourceNotFoundError (404)
    - GET collection returns every person (full scan, no pagination)
    - Storage errors are not caught here: global handlers map them (409/503)

Design Decisions:
    - Routes hold no business logic: parse, call use case, shape response
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import (
    get_create_person, get_get_person_by_id, get_list_persons,
)
from app.core.domain_types import PersonId
from app.core.errors import ResourceNotFoundError
from app.schemas.person import PersonCreate, PersonResponse
from app.services.create_person import CreatePerson
from app.services.get_person_by_id import GetPersonById
from app.services.list_persons import ListPersons

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/persons", tags=["persons"])


@router.post(
    "", response_model=PersonResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_person(
    body: PersonCreate,
    response: Response,
    use_case: CreatePerson = Depends(get_create_person),
):
    """Create a new person. The id is always generated server-side."""
    person = await use_case.execute(body)
    response.headers["Location"] = f"{router.prefix}/{person.id}"
    return PersonResponse.from_entity(person)


@router.get("", response_model=list[PersonResponse])
async def list_persons(
    use_case: ListPersons = Depends(get_list_persons),
):
    """List all persons."""
    persons = await use_case.execute()
    return [PersonResponse.from_entity(p) for p in persons]


@router.get("/{person_id}", response_model=PersonResponse)
async def get_person(
    person_id: UUID,
    use_case: GetPersonById = Depends(get_get_person_by_id),
):
    """Get a person by id."""
    person = await use_case.execute(PersonId(person_id))
    if person is None:
        raise ResourceNotFoundError("Person", str(person_id))
    return PersonResponse.from_entity(person)
