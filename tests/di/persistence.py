"""Mock persistence providers for testing."""

from dishka import Scope, provide

from masacarri.domain.repository import (
    CommentRepository,
    PageRepository,
    RepositoryScope,
    UserRepository,
)
from masacarri.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPageRepository,
    InMemoryRepositoryScope,
    InMemoryStore,
    InMemoryUserRepository,
)
from masacarri.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so state survives across requests of one
    container; each test builds its own container and so gets a fresh store.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory tables."""
        return InMemoryStore()

    @provide(scope=Scope.APP)
    def get_repository_scope(self, store: InMemoryStore) -> RepositoryScope:
        """Provide repositories for background work."""
        return InMemoryRepositoryScope(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_page_repository(self, store: InMemoryStore) -> PageRepository:
        """Provide in-memory page repository."""
        return InMemoryPageRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)
