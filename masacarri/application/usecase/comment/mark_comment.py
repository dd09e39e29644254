"""Mark comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel


class MarkCommentRequest(BaseModel):
    """Mark comment request."""

    page_id: UUID
    comment_id: UUID
    user_id: str  # From the authenticated session


class MarkCommentUseCase:
    """Use case for moderating a comment.

    Moderation is accepted from authenticated users and currently changes
    nothing.
    """

    async def execute(self, request: MarkCommentRequest) -> None:
        logfire.info(
            "Comment mark requested",
            page_id=str(request.page_id),
            comment_id=str(request.comment_id),
            user_id=request.user_id,
        )
