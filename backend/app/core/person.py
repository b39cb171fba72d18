"""Person Entity — the single domain record managed by this service.

Invariants:
    - id is assigned once, at creation, by CreatePerson (never by a repository or the store)
    - Instances are immutable: no update operation exists anywhere in the system
    - name carries no length/format constraint; birth_date has no time-of-day component

Design Decisions:
    - Frozen dataclass over ORM model: core never imports SQLAlchemy (dependency arrows point inward)
"""

from dataclasses import dataclass
from datetime import date

from app.core.domain_types import PersonId


@dataclass(frozen=True)
class Person:
    """A person record with system-assigned identity."""
    id: PersonId
    name: str
    birth_date: date
