"""Repository interfaces for Masacarri domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from masacarri.domain.repository.comment import CommentRepository
from masacarri.domain.repository.page import PageRepository
from masacarri.domain.repository.scope import Repositories, RepositoryScope
from masacarri.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "PageRepository",
    "Repositories",
    "RepositoryScope",
    "UserRepository",
]
