"""Comment response item shared by the comment use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from masacarri.domain.model import CommentView


class CommentItem(BaseModel):
    """Public comment as returned to clients."""

    id: UUID
    page_id: UUID
    reply_to: UUID | None
    display_name: str
    site_url: str | None
    content: str
    count_replies: int | None
    created_time: datetime

    @classmethod
    def from_view(cls, view: CommentView) -> "CommentItem":
        return cls(
            id=view.id,
            page_id=view.page_id,
            reply_to=view.reply_to,
            display_name=view.display_name,
            site_url=view.site_url,
            content=view.content,
            count_replies=view.count_replies,
            created_time=view.created_time,
        )
