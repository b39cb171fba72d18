"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - SQLAlchemy exceptions mapped to ConstraintViolationError / StorageUnavailableError
      (core/errors.py); IntegrityError and DataError mean the store refused the write,
      everything else means the store could not serve the request

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: prevents lazy-load issues in async context
    - translate_db_errors shared by session() and repositories: one mapping table (_DB_ERROR_MAP)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, DataError, OperationalError, DBAPIError, SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy import text

from app.core.errors import (
    PersonServiceError, ConstraintViolationError, StorageUnavailableError,
)

logger = logging.getLogger(__name__)

# First match wins: subclasses precede DBAPIError / SQLAlchemyError.
# IntegrityError and DataError mean the store was reached and refused the value.
_DB_ERROR_MAP: tuple[tuple[type[SQLAlchemyError], type[PersonServiceError], str], ...] = (
    (IntegrityError, ConstraintViolationError, "Integrity constraint violated"),
    (DataError, ConstraintViolationError, "Value rejected by the store"),
    (OperationalError, StorageUnavailableError, "Connection or operational error"),
    (PoolTimeoutError, StorageUnavailableError, "Timed out waiting for a connection"),
    (DBAPIError, StorageUnavailableError, "Database driver error"),
    (SQLAlchemyError, StorageUnavailableError, "Database operation failed"),
)


@asynccontextmanager
async def translate_db_errors(
    session: AsyncSession, operation: str,
) -> AsyncGenerator[None, None]:
    """Roll back and re-raise SQLAlchemy failures as domain storage errors."""
    try:
        yield
    except SQLAlchemyError as e:
        await session.rollback()
        error_cls, message = next(
            (cls, msg) for exc_type, cls, msg in _DB_ERROR_MAP
            if isinstance(e, exc_type)
        )
        error = error_cls(message, operation)
        logger.error(
            f"{type(e).__name__} during {operation}: {e}",
            extra={"operation": operation, "error_code": error.code},
        )
        raise error from e


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 20,
        max_overflow: int = 10,
        pool_timeout: int = 30,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            async with translate_db_errors(session, "session"):
                yield session
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (used by the readiness endpoint)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager:
        await db_manager.dispose()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
