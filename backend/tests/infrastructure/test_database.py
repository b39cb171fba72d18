"""Database Session Manager — error translation, health checks, singleton lifecycle.

Invariants:
    - Refused writes (IntegrityError, DataError) surface as ConstraintViolationError
    - Every other SQLAlchemy failure surfaces as StorageUnavailableError
    - The session is rolled back before the domain error is raised
    - health_check() never raises: True when reachable, False otherwise
    - get_db() refuses to run before init_db()

Design Decisions:
    - File-backed SQLite under tmp_path: the manager's queue-pool settings need a file database
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, DataError, OperationalError, InterfaceError,
    SQLAlchemyError, TimeoutError as PoolTimeoutError,
)

import app.infrastructure.database as db_module
from app.core.errors import ConstraintViolationError, StorageUnavailableError
from app.infrastructure.database import (
    DatabaseSessionManager, get_db, translate_db_errors,
)


def _sqlite_url(path) -> str:
    return f"sqlite+aiosqlite:///{path}"


def _dbapi(cls, detail: str):
    return cls("INSERT INTO persons ...", {}, Exception(detail))


@pytest.mark.parametrize(
    ("raised", "expected"),
    [
        (_dbapi(IntegrityError, "duplicate key"), ConstraintViolationError),
        (_dbapi(DataError, "invalid byte sequence 0x00"), ConstraintViolationError),
        (_dbapi(OperationalError, "connection refused"), StorageUnavailableError),
        (_dbapi(InterfaceError, "connection closed"), StorageUnavailableError),
        (PoolTimeoutError("QueuePool limit reached"), StorageUnavailableError),
        (SQLAlchemyError("unexpected"), StorageUnavailableError),
    ],
)
async def test_translate_db_errors_maps_to_domain_error(raised, expected):
    session = AsyncMock()

    with pytest.raises(expected) as exc_info:
        async with translate_db_errors(session, "add"):
            raise raised

    assert exc_info.value.operation == "add"
    assert exc_info.value.__cause__ is raised
    session.rollback.assert_awaited_once()


async def test_rejected_value_is_409_not_503():
    with pytest.raises(ConstraintViolationError) as exc_info:
        async with translate_db_errors(AsyncMock(), "add"):
            raise _dbapi(DataError, "invalid byte sequence for encoding UTF8: 0x00")
    assert exc_info.value.http_status == 409


async def test_translate_db_errors_leaves_domain_errors_alone():
    session = AsyncMock()
    error = ConstraintViolationError("duplicate id", "add")

    with pytest.raises(ConstraintViolationError) as exc_info:
        async with translate_db_errors(session, "add"):
            raise error

    assert exc_info.value is error
    session.rollback.assert_not_awaited()


async def test_health_check_true_when_reachable(tmp_path):
    manager = DatabaseSessionManager(_sqlite_url(tmp_path / "ok.db"))
    try:
        assert await manager.health_check() is True
    finally:
        await manager.dispose()


async def test_health_check_false_when_unreachable(tmp_path):
    manager = DatabaseSessionManager(
        _sqlite_url(tmp_path / "missing" / "dir" / "x.db"),
    )
    try:
        assert await manager.health_check() is False
    finally:
        await manager.dispose()


async def test_session_translates_operational_error(tmp_path):
    manager = DatabaseSessionManager(_sqlite_url(tmp_path / "ok.db"))
    try:
        with pytest.raises(StorageUnavailableError) as exc_info:
            async with manager.session() as db:
                await db.execute(text("SELECT * FROM no_such_table"))
        assert exc_info.value.operation == "session"
    finally:
        await manager.dispose()


async def test_init_and_close_db_manage_singleton(tmp_path, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)

    manager = db_module.init_db(_sqlite_url(tmp_path / "ok.db"), pool_size=2)
    assert db_module.db_manager is manager

    await db_module.close_db()
    assert db_module.db_manager is None


async def test_get_db_requires_initialization(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    with pytest.raises(RuntimeError, match="not initialized"):
        await anext(get_db())
