"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

import ipaddress
from typing import Any, Dict
from uuid import UUID

from masacarri.domain.model import Comment, CommentWithReplies, Page, User
from masacarri.domain.value import CommentId, PageId, UserId, Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    ``ip_addr`` may come back as an address, an interface or a string
    depending on the driver; it is normalized to a network.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        page_id=PageId(_uuid(row["page_id"])),
        reply_to=CommentId(_uuid(row["reply_to"])) if row.get("reply_to") else None,
        ip_addr=ipaddress.ip_network(str(row["ip_addr"]), strict=False),
        display_name=row["display_name"],
        site_url=row.get("site_url"),
        mail_addr=row.get("mail_addr"),
        content=row["content"],
        delete_key=row["delete_key"],
        flags=row["flags"],
        created_time=row["created_time"],
    )


def row_to_comment_with_replies(row: Dict[str, Any]) -> CommentWithReplies:
    """Convert a comment row carrying a ``count_replies`` column."""
    return CommentWithReplies(
        comment=row_to_comment(row),
        count_replies=row["count_replies"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return comment.model_dump()


def row_to_page(row: Dict[str, Any]) -> Page:
    """Convert database row to Page domain model."""
    return Page(
        id=PageId(_uuid(row["id"])),
        title=row["title"],
        page_url=row["page_url"],
        published=row["published"],
    )


def page_to_dict(page: Page) -> Dict[str, Any]:
    """Convert Page domain model to database dict."""
    return page.model_dump()


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        password_hash=row["password_hash"],
        flags=row["flags"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    ``Username`` dumps to its plain string.
    """
    return user.model_dump()
