"""Async engine and session factory for the PostgreSQL store.

One engine (and its pool) lives for the whole process. Every request opens
its own session from the factory, see ``ProdPersistenceProvider``.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ideapool.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the engine from ``settings.database``.

    SQL is echoed when ``debug`` is on.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,  # Drop connections the server closed while idle
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions for the repositories.

    Repositories return domain models built from result rows, never ORM
    instances, so nothing needs refreshing after commit. They flush
    explicitly after each write.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
