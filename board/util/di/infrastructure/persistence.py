"""Database wiring: engine, sessions and repositories."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from board.config import Settings
from board.domain.repository import PostRepository, UserRepository
from board.persistence.database import create_engine, create_session_factory
from board.persistence.repository import (
    PostgresPostRepository,
    PostgresUserRepository,
)
from board.util.di.base import ProviderBase
from board.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Mockable persistence component.

    Subclasses provide ``PostRepository`` and ``UserRepository``.
    """

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories backed by PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """One engine per container, disposed when the container closes."""
        db_engine = create_engine(settings)
        instrument_sqlalchemy(db_engine)
        yield db_engine
        await db_engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def sessionmaker(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, sessionmaker: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request.

        Commits when the request scope exits cleanly, rolls back when it
        exits with an error.
        """
        async with sessionmaker() as db_session:
            try:
                yield db_session
            except Exception as e:
                logfire.warn("Rolling back request transaction", error=str(e))
                await db_session.rollback()
                raise
            await db_session.commit()

    @provide(scope=Scope.REQUEST)
    def posts(self, session: AsyncSession) -> PostRepository:
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def users(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)
