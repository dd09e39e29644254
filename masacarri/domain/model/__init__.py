"""Domain model entities for Masacarri."""

from masacarri.domain.model.comment import (
    Comment,
    CommentView,
    CommentWithReplies,
    project_comment,
)
from masacarri.domain.model.page import Page
from masacarri.domain.model.user import User

__all__ = [
    "Comment",
    "CommentView",
    "CommentWithReplies",
    "Page",
    "User",
    "project_comment",
]
