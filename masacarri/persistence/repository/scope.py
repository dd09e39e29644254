"""Session-backed repository scope for background work."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from masacarri.domain.repository import Repositories, RepositoryScope
from masacarri.persistence.repository.comment import PostgresCommentRepository
from masacarri.persistence.repository.page import PostgresPageRepository


class PostgresRepositoryScope(RepositoryScope):
    """Opens a fresh session per scope."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    @asynccontextmanager
    async def open(self) -> AsyncIterator[Repositories]:
        """Open repositories on a new session, closed on exit."""
        async with self.session_factory() as session:
            yield Repositories(
                comments=PostgresCommentRepository(session),
                pages=PostgresPageRepository(session),
            )
