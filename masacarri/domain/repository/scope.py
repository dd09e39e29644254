"""Repository access outside of an HTTP request."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass

from masacarri.domain.repository.comment import CommentRepository
from masacarri.domain.repository.page import PageRepository


@dataclass(frozen=True)
class Repositories:
    """Repositories sharing one store connection."""

    comments: CommentRepository
    pages: PageRepository


class RepositoryScope(ABC):
    """Opens repositories with their own connection.

    Background workers use this instead of the request-scoped session,
    which is released as soon as the request completes.
    """

    @abstractmethod
    def open(self) -> AbstractAsyncContextManager[Repositories]:
        """Open a read-only repository scope."""
        pass
