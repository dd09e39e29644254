"""Persistence component providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from masacarri.config import Settings
from masacarri.domain.repository import (
    CommentRepository,
    PageRepository,
    RepositoryScope,
    UserRepository,
)
from masacarri.persistence.database import create_engine, create_session_factory
from masacarri.persistence.repository import (
    PostgresCommentRepository,
    PostgresPageRepository,
    PostgresRepositoryScope,
    PostgresUserRepository,
)
from masacarri.util.di.base import ProviderBase
from masacarri.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repositories and whatever backs them."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL through SQLAlchemy Core and asyncpg.

    One engine per container. Each request gets one session and therefore
    one transaction; background work opens its own via ``RepositoryScope``.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.APP)
    def repository_scope(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> RepositoryScope:
        return PostgresRepositoryScope(session_factory)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Request transaction, committed once the request has been handled.

        Errors rendered by the exception handlers do not reach this scope;
        only exceptions escaping the application roll back.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn(
                    "Request transaction rolled back",
                    error_type=type(e).__name__,
                )
                await session.rollback()
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def page_repository(self, session: AsyncSession) -> PageRepository:
        return PostgresPageRepository(session)

    @provide(scope=Scope.REQUEST)
    def user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)
