"""Domain value objects for Masacarri."""

from masacarri.domain.value.identifiers import CommentId, PageId, UserId
from masacarri.domain.value.types import (
    CommentFlags,
    CommentScope,
    ContextScope,
    FullPage,
    Pagination,
    ReplyScope,
    Username,
    comment_scope,
)

__all__ = [
    # Identifiers
    "PageId",
    "CommentId",
    "UserId",
    # Types
    "CommentFlags",
    "CommentScope",
    "ContextScope",
    "FullPage",
    "Pagination",
    "ReplyScope",
    "Username",
    "comment_scope",
]
