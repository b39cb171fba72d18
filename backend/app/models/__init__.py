"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - ORM rows never leave infrastructure/: repositories map them to core entities

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is populated before create_all / autogenerate
"""

from app.models.person import PersonModel  # noqa: F401
