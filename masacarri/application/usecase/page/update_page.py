"""Update page use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from masacarri.domain.service import PageService
from masacarri.domain.value import PageId


class UpdatePageRequest(BaseModel):
    """Update page request."""

    page_id: UUID
    title: str = Field(max_length=1000)
    page_url: str = Field(max_length=2000)
    published: bool


class UpdatePageUseCase:
    """Use case for overwriting page metadata."""

    def __init__(self, page_service: PageService) -> None:
        self.page_service = page_service

    async def execute(self, request: UpdatePageRequest) -> None:
        await self.page_service.update_page(
            PageId(request.page_id),
            title=request.title,
            page_url=request.page_url,
            published=request.published,
        )
