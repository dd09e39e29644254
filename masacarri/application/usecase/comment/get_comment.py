"""Get single comment use case."""

from uuid import UUID

from pydantic import BaseModel

from masacarri.application.usecase.base import BaseUseCase
from masacarri.domain.error import NotFoundError
from masacarri.domain.service import CommentService
from masacarri.domain.value import CommentId, PageId

from .common import CommentItem


class GetCommentRequest(BaseModel):
    """Get comment request."""

    page_id: UUID
    comment_id: UUID


class GetCommentUseCase(BaseUseCase[GetCommentRequest, CommentItem]):
    """Use case for fetching one comment of a page."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        """Fetch the comment with its reply count.

        Raises:
            NotFoundError: If no comment of the page has this ID
        """
        view = await self.comment_service.get_comment(
            PageId(request.page_id), CommentId(request.comment_id)
        )
        if view is None:
            raise NotFoundError("comment", str(request.comment_id))
        return CommentItem.from_view(view)
