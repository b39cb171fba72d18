"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PersonId wraps a UUID — never use bare UUID in domain logic
    - PersonId values are minted only by the CreatePerson use case

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

PersonId = NewType("PersonId", UUID)
