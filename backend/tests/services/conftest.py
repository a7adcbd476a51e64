"""Service test fixtures — async in-memory DB and an AssetStore bound to it.

Invariants:
    - Every test gets a fresh in-memory SQLite database (ids restart at 1)
    - Tables created from Base.metadata, the same metadata alembic migrates
    - store is bound to the same session as test_db so assertions see its writes

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for keyset and join
      semantics (PostgreSQL-specific behaviour is not exercised here)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from assetvault.db.base import Base
import assetvault.models  # noqa: F401
from assetvault.services.asset_store import AssetStore


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
def store(test_db):
    return AssetStore(test_db, max_page_limit=100)

