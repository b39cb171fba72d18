"""API test fixtures — FastAPI test client over a file-backed SQLite database.

Invariants:
    - Requests go through the real get_db → DatabaseSessionManager path
    - Each request gets its own pooled connection, so concurrent requests do not
      share a transaction
    - db_manager and dependency_overrides restored after every test

Design Decisions:
    - File database under tmp_path over :memory:: in-memory SQLite pins every
      session to one connection, which cannot model concurrent requests
    - httpx AsyncClient + ASGITransport: no server process, lifespan not run
"""

import pytest
from httpx import ASGITransport, AsyncClient

import app.infrastructure.database as db_module
from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager
from app.main import app


@pytest.fixture
async def api_db_manager(tmp_path, monkeypatch):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
    )
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    monkeypatch.setattr(db_module, "db_manager", manager)
    yield manager
    await manager.dispose()


@pytest.fixture
async def client(api_db_manager):
    """FastAPI test client wired to the per-test database manager."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
