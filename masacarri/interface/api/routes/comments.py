"""Comment routes.

Reading and posting comments is public; moderation needs a session.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, Request, Response, status
from pydantic import BaseModel

from masacarri.application.usecase.comment import (
    CommentItem,
    CountCommentsRequest,
    CountCommentsResponse,
    CountCommentsUseCase,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetCommentUseCase,
    MarkCommentRequest,
    MarkCommentUseCase,
)
from masacarri.domain.service import JWTService
from masacarri.interface.api.session import require_user_id

router = APIRouter(prefix="/pages", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    reply_to: UUID | None = None
    display_name: str
    site_url: str | None = None
    mail_addr: str | None = None
    content: str
    delete_key: str | None = None


@router.get("/{page_id}/comments", response_model=list[CommentItem])
async def get_comments(
    page_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    num: int | None = Query(default=None, description="Comments per page"),
    index: int | None = Query(default=None, description="1-based page index"),
    replyto: UUID | None = Query(default=None, description="List direct replies"),
    contextof: UUID | None = Query(
        default=None, description="List a comment and its ancestors"
    ),
) -> list[CommentItem]:
    """List comments of a page in creation order.

    Example:
        GET /api/pages/{page_id}/comments?num=20&index=2
        GET /api/pages/{page_id}/comments?replyto={comment_id}
        GET /api/pages/{page_id}/comments?contextof={comment_id}
    """
    result = await get_comments_use_case.execute(
        GetCommentsRequest(
            page_id=page_id,
            per_page=num,
            page_index=index,
            reply_to=replyto,
            context_of=contextof,
        )
    )
    return result.comments


@router.post(
    "/{page_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    page_id: UUID,
    request: CreateCommentAPIRequest,
    http_request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentItem:
    """Post a comment, or a reply when ``reply_to`` is set.

    The submitter address is taken from the connection peer.
    """
    client = http_request.client
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            page_id=page_id,
            reply_to=request.reply_to,
            display_name=request.display_name,
            site_url=request.site_url,
            mail_addr=request.mail_addr,
            content=request.content,
            delete_key=request.delete_key,
            submitter_ip=client.host if client else "",
        )
    )


@router.get("/{page_id}/comments/{comment_id}", response_model=CommentItem)
async def get_comment(
    page_id: UUID,
    comment_id: UUID,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentItem:
    """Fetch one comment with its reply count; 404 if not on this page."""
    return await get_comment_use_case.execute(
        GetCommentRequest(page_id=page_id, comment_id=comment_id)
    )


@router.patch(
    "/{page_id}/comments/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def mark_comment(
    page_id: UUID,
    comment_id: UUID,
    mark_comment_use_case: FromDishka[MarkCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Moderate a comment. Requires a session."""
    user_id = require_user_id(jwt_service, auth_token)
    await mark_comment_use_case.execute(
        MarkCommentRequest(page_id=page_id, comment_id=comment_id, user_id=user_id)
    )


@router.get("/{page_id}/comments_count", response_model=CountCommentsResponse)
async def count_comments(
    page_id: UUID,
    count_comments_use_case: FromDishka[CountCommentsUseCase],
    replyto: UUID | None = Query(default=None),
    contextof: UUID | None = Query(default=None),
) -> CountCommentsResponse:
    """Count comments with the same scope rules as listing."""
    return await count_comments_use_case.execute(
        CountCommentsRequest(page_id=page_id, reply_to=replyto, context_of=contextof)
    )
