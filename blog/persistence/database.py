"""Async engine, session factory and the per-request transaction."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from blog.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg engine with the configured pool."""
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Repositories map rows to domain models themselves, so nothing is expired
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """One session per request.

    Writes are made durable by the use case through its unit of work, before
    the response is built. Whatever was not committed when the block exits
    is rolled back, so a failed request leaves no partial writes behind.
    """
    async with session_factory() as session:
        try:
            yield session
        except Exception as e:
            logfire.warn("Rolling back transaction", error_type=type(e).__name__)
            await session.rollback()
            raise
