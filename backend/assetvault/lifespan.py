"""Lifespan — startup/shutdown for processes that embed the asset store.

Invariants:
    - Logging configured before the engine is created
    - The engine is disposed on exit, even when the body raises

Design Decisions:
    - Async context manager over module import side effects: the embedding process
      decides when the pool opens and closes
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from assetvault.config import Settings, get_settings
from assetvault.infrastructure.database import DatabaseSessionManager, init_db
from assetvault.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(
    settings: Settings | None = None, create_schema: bool = False,
) -> AsyncIterator[DatabaseSessionManager]:
    """Startup/shutdown lifecycle."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    if create_schema:
        await manager.create_schema()
    logger.info("Asset store started")
    try:
        yield manager
    finally:
        await manager.dispose()
        logger.info("Asset store shut down")
