"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from masacarri.application.usecase.base import BaseUseCase
from masacarri.config import CommentSettings
from masacarri.domain.service import CommentService
from masacarri.domain.value import CommentId, PageId, Pagination, comment_scope

from .common import CommentItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    page_id: UUID
    per_page: int | None = None
    page_index: int | None = None
    reply_to: UUID | None = None
    context_of: UUID | None = None


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentItem]


class GetCommentsUseCase(
    BaseUseCase[GetCommentsRequest, GetCommentsResponse]
):
    """Use case for listing one page of a comment thread."""

    def __init__(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            comment_settings: Page size defaults and limits
        """
        self.comment_service = comment_service
        self.comment_settings = comment_settings

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Comments are ordered by creation time. ``reply_to`` narrows the listing
        to direct replies, ``context_of`` to a comment and its ancestors.

        Raises:
            ValidationError: If pagination is out of range or both scopes are set
        """
        pagination = Pagination.create(
            per_page=request.per_page,
            page_index=request.page_index,
            default_per_page=self.comment_settings.default_per_page,
            max_per_page=self.comment_settings.max_per_page,
        )
        scope = comment_scope(
            reply_to=CommentId(request.reply_to) if request.reply_to else None,
            context_of=CommentId(request.context_of) if request.context_of else None,
        )

        views = await self.comment_service.list_comments(
            PageId(request.page_id), scope, pagination
        )
        return GetCommentsResponse(
            comments=[CommentItem.from_view(view) for view in views]
        )
