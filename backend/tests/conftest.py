"""Root conftest — shared test configuration and async DB fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - DATABASE_URL points at SQLite before app.config is first imported

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for adapter and route tests
"""

import os
from datetime import date
from uuid import uuid4

# Ensure tests never reach a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from app.core.domain_types import PersonId  # noqa: E402
from app.core.person import Person  # noqa: E402
from app.db.base import Base  # noqa: E402
import app.models  # noqa: E402, F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def make_person():
    """Build a Person with a fresh id; override any field by keyword."""
    def _make(**overrides) -> Person:
        fields = {
            "id": PersonId(uuid4()),
            "name": "John Doe",
            "birth_date": date(1990, 1, 1),
        }
        fields.update(overrides)
        return Person(**fields)
    return _make
