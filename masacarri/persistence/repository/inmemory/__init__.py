"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .page import InMemoryPageRepository
from .scope import InMemoryRepositoryScope
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPageRepository",
    "InMemoryRepositoryScope",
    "InMemoryStore",
    "InMemoryUserRepository",
]
