"""PostgreSQL repository implementations."""

from masacarri.persistence.repository.comment import PostgresCommentRepository
from masacarri.persistence.repository.page import PostgresPageRepository
from masacarri.persistence.repository.scope import PostgresRepositoryScope
from masacarri.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresPageRepository",
    "PostgresRepositoryScope",
    "PostgresUserRepository",
]
