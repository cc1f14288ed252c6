"""Persistence providers: where the repositories come from."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from ideapool.config import Settings
from ideapool.domain.repository import IdeaRepository, UserRepository
from ideapool.persistence.database import create_engine, create_session_factory
from ideapool.persistence.repository import (
    PostgresIdeaRepository,
    PostgresUserRepository,
)
from ideapool.util.di.base import ProviderBase
from ideapool.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Swappable persistence component."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories sharing one transaction per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Engine for the process lifetime, disposed when the container closes."""
        engine = create_engine(settings)
        if settings.observability.instrument:
            instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Request transaction.

        Both repositories of a request write through this session, so a
        sign-up or an account removal commits or rolls back as a whole.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Rolling back request transaction", error=str(e))
                await session.rollback()
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_idea_repository(self, session: AsyncSession) -> IdeaRepository:
        return PostgresIdeaRepository(session)
