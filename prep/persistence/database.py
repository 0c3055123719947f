"""Async engine, sessions and schema bootstrap for PostgreSQL."""

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from prep.config import Settings
from prep.persistence.tables import metadata


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg engine.

    Args:
        settings: Application settings (database section)

    Returns:
        Async engine; SQL is echoed when debug is on
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for request-scoped sessions.

    Sessions never autoflush; repositories flush after each write so
    RETURNING rows and counters are visible within the request.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create every table that does not exist yet.

    Existing tables are left as they are; there is no migration step.
    """
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logfire.info("Database schema ensured", tables=sorted(metadata.tables))
