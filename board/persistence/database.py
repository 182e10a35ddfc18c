"""Async engine and sessions for PostgreSQL (asyncpg driver)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from board.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the process-wide engine from ``settings.database``.

    SQL is echoed when ``settings.debug`` is on.
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
    """Build the factory for request-scoped sessions.

    Objects stay usable after commit and nothing is flushed implicitly;
    repositories flush explicitly after each write.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
