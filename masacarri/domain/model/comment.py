"""Comment entity and its public projection.

Comments form a forest per page through ``reply_to`` parent pointers.
The stored entity carries private fields (submitter address, mail address,
delete key) that never leave the service; clients only ever see a
``CommentView``.
"""

from datetime import datetime, timezone

from pydantic import Field, IPvAnyNetwork

from masacarri.domain.model.common import DomainModel
from masacarri.domain.value import CommentFlags, CommentId, PageId

SPAM_CONTENT_PLACEHOLDER = "(This comment is marked as spam.)"

# Stored in place of a hashed delete key when none was supplied
NO_DELETE_KEY = "-"


class Comment(DomainModel):
    """Comment entity as stored."""

    id: CommentId
    page_id: PageId
    reply_to: CommentId | None = None
    ip_addr: IPvAnyNetwork
    display_name: str = Field(min_length=1)
    site_url: str | None = None
    mail_addr: str | None = None
    content: str = Field(min_length=1)
    delete_key: str = NO_DELETE_KEY
    flags: int = 0
    created_time: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_spam(self) -> bool:
        """Whether the comment has been marked as spam."""
        return bool(self.flags & CommentFlags.SPAM)


class CommentWithReplies(DomainModel):
    """A stored comment paired with its direct reply count."""

    comment: Comment
    count_replies: int = Field(ge=0)


class CommentView(DomainModel):
    """Public, redacted view of a comment."""

    id: CommentId
    page_id: PageId
    reply_to: CommentId | None
    display_name: str
    site_url: str | None
    content: str
    count_replies: int | None
    created_time: datetime


def project_comment(comment: Comment, count_replies: int | None = None) -> CommentView:
    """Project a stored comment to its public view.

    Spam-flagged content is replaced by a fixed placeholder. Address, mail
    and delete key fields are never copied.
    """
    return CommentView(
        id=comment.id,
        page_id=comment.page_id,
        reply_to=comment.reply_to,
        display_name=comment.display_name,
        site_url=comment.site_url,
        content=SPAM_CONTENT_PLACEHOLDER if comment.is_spam else comment.content,
        count_replies=count_replies,
        created_time=comment.created_time,
    )
