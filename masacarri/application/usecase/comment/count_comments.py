"""Count comments use case."""

from uuid import UUID

from pydantic import BaseModel

from masacarri.application.usecase.base import BaseUseCase
from masacarri.domain.service import CommentService
from masacarri.domain.value import CommentId, PageId, comment_scope


class CountCommentsRequest(BaseModel):
    """Count comments request."""

    page_id: UUID
    reply_to: UUID | None = None
    context_of: UUID | None = None


class CountCommentsResponse(BaseModel):
    """Count comments response."""

    count: int


class CountCommentsUseCase(
    BaseUseCase[CountCommentsRequest, CountCommentsResponse]
):
    """Use case for counting the comments of a scope."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: CountCommentsRequest) -> CountCommentsResponse:
        """Count comments with the same scope rules as listing.

        Raises:
            ValidationError: If both scopes are set
        """
        scope = comment_scope(
            reply_to=CommentId(request.reply_to) if request.reply_to else None,
            context_of=CommentId(request.context_of) if request.context_of else None,
        )
        count = await self.comment_service.count_comments(
            PageId(request.page_id), scope
        )
        return CountCommentsResponse(count=count)
