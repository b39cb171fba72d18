"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Lookups signal "not found" with None, never with an exception

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO
"""

from typing import Protocol

from app.core.domain_types import PersonId
from app.core.person import Person


class PersonRepository(Protocol):
    """Contract for Person persistence — implemented by shell.

    Failures surface as StorageUnavailableError or ConstraintViolationError
    (core/errors.py); nothing is retried at this layer.
    """
    async def get_by_id(self, person_id: PersonId) -> Person | None: ...
    async def get_all(self) -> list[Person]: ...
    async def add(self, person: Person) -> None: ...
