"""Database Session Manager — async connection pool, per-operation error translation, health checks.

Invariants:
    - Every failed operation rolls back its session (no partial commits leak)
    - All SQLAlchemy exceptions surface as PersistenceError naming the operation
    - AssetVaultError raised inside an operation propagates unchanged (after rollback)
    - Nothing here retries: failures go straight back to the caller

Design Decisions:
    - store_operation() wraps one repository call; DatabaseSessionManager.session()
      wraps a whole unit of work; both share _persistence_error for the mapping
    - Pool sizing only applied to server databases: SQLite pools reject it
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from assetvault.core.errors import PersistenceError

logger = logging.getLogger(__name__)


def _persistence_error(exc: SQLAlchemyError, operation: str) -> PersistenceError:
    """Map a SQLAlchemy exception to PersistenceError, most specific first."""
    if isinstance(exc, IntegrityError):
        reason = "Integrity constraint violated"
    elif isinstance(exc, OperationalError):
        reason = "Connection or operational error"
    elif isinstance(exc, DBAPIError):
        reason = "Database driver error"
    else:
        reason = "Database operation failed"
    logger.error(
        f"{operation}: {reason}: {exc}",
        extra={"operation": operation, "error_code": "PERSISTENCE_ERROR"},
    )
    return PersistenceError(reason, operation)


@asynccontextmanager
async def store_operation(
    db: AsyncSession, operation: str,
) -> AsyncGenerator[AsyncSession, None]:
    """Run one repository operation; roll back and translate on failure."""
    try:
        yield db
    except SQLAlchemyError as e:
        await db.rollback()
        raise _persistence_error(e, operation) from e
    except Exception:
        await db.rollback()
        raise


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 20,
        max_overflow: int = 10,
        echo: bool = False,
    ):
        engine_kwargs: dict = {"echo": echo, "pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
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
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            raise _persistence_error(e, "session") from e
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create every table known to Base.metadata (dev and test databases)."""
        from assetvault.db.base import Base
        import assetvault.models  # noqa: F401  registers all tables

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
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


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session from the initialized manager."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
