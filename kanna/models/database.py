"""Database configuration and session management.

This module provides:
- Async SQLAlchemy engine construction from settings
- Session factory for repository operations
- Database initialization and reset utilities

Nothing here is created at import time; the application context owns the
engine and hands the session factory to the repository.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from kanna.config.constants import DB_POOL_MAX_OVERFLOW, DB_POOL_SIZE
from kanna.config.settings import Settings

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for ``settings.DATABASE_URL``.

    Server databases get an explicit connection pool; SQLite keeps the
    driver's default pool since it ignores pool sizing.
    """
    url = settings.DATABASE_URL
    kwargs = {"echo": settings.DEBUG, "future": True, "pool_pre_ping": True}
    if not url.startswith("sqlite"):
        kwargs.update(pool_size=DB_POOL_SIZE, max_overflow=DB_POOL_MAX_OVERFLOW)
    return create_async_engine(url, **kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Create the session factory shared by the repository."""
    return async_sessionmaker(engine, expire_on_commit=False)


async def init_db(engine: AsyncEngine) -> None:
    """Initialize database by creating all tables.

    Safe to call multiple times (idempotent operation).
    """
    # Register models on Base.metadata
    from kanna.models import word  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialized successfully")


async def reset_db(engine: AsyncEngine) -> None:
    """Drop all database tables.

    WARNING: This permanently deletes all cached words and definitions.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("Database tables dropped - all data removed")
