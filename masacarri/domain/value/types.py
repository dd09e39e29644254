"""Domain value objects for Masacarri.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules for comment listings.
"""

import re
from enum import IntFlag
from typing import Literal, Union

from pydantic import field_validator

from masacarri.domain.error import ValidationError
from masacarri.domain.value.common import RootValueObject, ValueObject
from masacarri.domain.value.identifiers import CommentId

DEFAULT_COMMENTS_PER_PAGE = 10
DEFAULT_PAGE_INDEX = 1
MAX_COMMENTS_PER_PAGE = 256

SCOPE_CONFLICT_MESSAGE = (
    "'replyto' and 'contextof' are not allowed to use simultaneously."
)


class CommentFlags(IntFlag):
    """Bit flags stored in ``comments.flags``."""

    NONE = 0
    SPAM = 1


class Username(RootValueObject[str]):
    """Login name of an administrator account."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Usernames are 1-64 printable characters without whitespace."""
        if not re.match(r"^\S{1,64}$", v):
            raise ValueError("Username must be 1-64 characters without whitespace")
        return v


class Pagination(ValueObject):
    """A 1-based page of a comment listing."""

    per_page: int
    page_index: int

    @classmethod
    def create(
        cls,
        per_page: int | None = None,
        page_index: int | None = None,
        default_per_page: int = DEFAULT_COMMENTS_PER_PAGE,
        max_per_page: int = MAX_COMMENTS_PER_PAGE,
    ) -> "Pagination":
        """Build pagination from optional query values.

        Raises:
            ValidationError: If the page index is below 1 or the page size is
                outside ``1..max_per_page``
        """
        per_page = default_per_page if per_page is None else per_page
        page_index = DEFAULT_PAGE_INDEX if page_index is None else page_index

        if page_index < 1:
            raise ValidationError("invalid page index")
        if per_page < 1 or per_page > max_per_page:
            raise ValidationError(
                f"Comments per page is limited up to {max_per_page}."
            )

        return cls(per_page=per_page, page_index=page_index)

    @property
    def offset(self) -> int:
        """Number of comments skipped before this page."""
        return (self.page_index - 1) * self.per_page

    @property
    def limit(self) -> int:
        """Maximum number of comments on this page."""
        return self.per_page


class FullPage(ValueObject):
    """Every comment of the page, top-level and nested."""

    kind: Literal["page"] = "page"


class ReplyScope(ValueObject):
    """Direct replies to one comment."""

    kind: Literal["reply"] = "reply"
    comment_id: CommentId


class ContextScope(ValueObject):
    """One comment together with all of its ancestors."""

    kind: Literal["context"] = "context"
    comment_id: CommentId


CommentScope = Union[FullPage, ReplyScope, ContextScope]


def comment_scope(
    reply_to: CommentId | None = None, context_of: CommentId | None = None
) -> CommentScope:
    """Select the listing scope from the optional query identifiers.

    Raises:
        ValidationError: If both identifiers are given
    """
    if reply_to is not None and context_of is not None:
        raise ValidationError(SCOPE_CONFLICT_MESSAGE)
    if reply_to is not None:
        return ReplyScope(comment_id=reply_to)
    if context_of is not None:
        return ContextScope(comment_id=context_of)
    return FullPage()
