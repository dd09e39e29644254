"""Create comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from masacarri.application.usecase.base import BaseUseCase
from masacarri.domain.error import ValidationError
from masacarri.domain.service import CommentService, PageService
from masacarri.domain.value import CommentId, PageId

from .common import CommentItem

INVALID_PAGE_MESSAGE = "You commented on an invalid page."


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    page_id: UUID
    display_name: str
    content: str
    submitter_ip: str  # Peer address of the HTTP client
    reply_to: UUID | None = None
    site_url: str | None = None
    mail_addr: str | None = None
    delete_key: str | None = None


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CommentItem]):
    """Use case for commenting on a page or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        page_service: PageService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            page_service: Page domain service
        """
        self.comment_service = comment_service
        self.page_service = page_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Steps:
        1. Verify the page exists via page service
        2. Create comment via comment service (validates reply target and text)

        Args:
            request: Create comment request

        Returns:
            The created comment, without a reply count

        Raises:
            ValidationError: If the page does not exist or the input is invalid
        """
        page_id = PageId(request.page_id)

        page = await self.page_service.get_page_by_id(page_id)
        if page is None:
            logfire.warn("Comment on unknown page rejected", page_id=str(page_id))
            raise ValidationError(INVALID_PAGE_MESSAGE)

        view = await self.comment_service.create_comment(
            page_id=page_id,
            display_name=request.display_name,
            content=request.content,
            submitter_ip=request.submitter_ip,
            reply_to=CommentId(request.reply_to) if request.reply_to else None,
            site_url=request.site_url,
            mail_addr=request.mail_addr,
            delete_key=request.delete_key,
        )
        return CommentItem.from_view(view)
