"""Shared in-memory tables for testing."""

from dataclasses import dataclass, field

from masacarri.domain.model import Comment, Page, User
from masacarri.domain.value import CommentId, PageId, UserId


@dataclass
class InMemoryStore:
    """Tables shared by the in-memory repositories.

    Dicts keep insertion order, which doubles as the tie-breaker for
    comments created at the same instant.
    """

    comments: dict[CommentId, Comment] = field(default_factory=dict)
    pages: dict[PageId, Page] = field(default_factory=dict)
    users: dict[UserId, User] = field(default_factory=dict)
