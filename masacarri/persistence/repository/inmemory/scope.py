"""In-memory repository scope for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from masacarri.domain.repository import Repositories, RepositoryScope

from .comment import InMemoryCommentRepository
from .page import InMemoryPageRepository
from .store import InMemoryStore


class InMemoryRepositoryScope(RepositoryScope):
    """Repository scope over a shared in-memory store."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    @asynccontextmanager
    async def open(self) -> AsyncIterator[Repositories]:
        """Open repositories over the shared store."""
        yield Repositories(
            comments=InMemoryCommentRepository(self._store),
            pages=InMemoryPageRepository(self._store),
        )
