"""Page routes.

Page management is restricted to logged-in administrators.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel, Field

from masacarri.application.usecase.page import (
    CreatePageRequest,
    CreatePageUseCase,
    DeletePageRequest,
    DeletePageUseCase,
    ListPagesUseCase,
    PageItem,
    UpdatePageRequest,
    UpdatePageUseCase,
)
from masacarri.domain.service import JWTService
from masacarri.interface.api.session import require_user_id

router = APIRouter(prefix="/pages", tags=["pages"], route_class=DishkaRoute)


class UpdatePageAPIRequest(BaseModel):
    """API request for updating a page."""

    title: str = Field(max_length=1000)
    page_url: str = Field(max_length=2000)
    published: bool


@router.get("", response_model=list[PageItem])
async def list_pages(
    list_pages_use_case: FromDishka[ListPagesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> list[PageItem]:
    """List every registered page."""
    require_user_id(jwt_service, auth_token)
    result = await list_pages_use_case.execute()
    return result.pages


@router.post("", response_model=PageItem, status_code=status.HTTP_201_CREATED)
async def create_page(
    request: CreatePageRequest,
    create_page_use_case: FromDishka[CreatePageUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PageItem:
    """Register a page.

    Example:
        POST /api/pages
        {"title": "Hello", "page_url": "https://blog.example.com/hello", "published": true}
    """
    require_user_id(jwt_service, auth_token)
    return await create_page_use_case.execute(request)


@router.patch(
    "/{page_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def update_page(
    page_id: UUID,
    request: UpdatePageAPIRequest,
    update_page_use_case: FromDishka[UpdatePageUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Overwrite a page's title, URL and published flag."""
    require_user_id(jwt_service, auth_token)
    await update_page_use_case.execute(
        UpdatePageRequest(
            page_id=page_id,
            title=request.title,
            page_url=request.page_url,
            published=request.published,
        )
    )


@router.delete(
    "/{page_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def delete_page(
    page_id: UUID,
    delete_page_use_case: FromDishka[DeletePageUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete a page and all of its comments."""
    require_user_id(jwt_service, auth_token)
    await delete_page_use_case.execute(DeletePageRequest(page_id=page_id))
