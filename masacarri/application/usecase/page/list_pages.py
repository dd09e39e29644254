"""List pages use case."""

from pydantic import BaseModel

from masacarri.domain.service import PageService

from .common import PageItem


class ListPagesResponse(BaseModel):
    """List pages response."""

    pages: list[PageItem]


class ListPagesUseCase:
    """Use case for listing every registered page."""

    def __init__(self, page_service: PageService) -> None:
        self.page_service = page_service

    async def execute(self) -> ListPagesResponse:
        pages = await self.page_service.list_pages()
        return ListPagesResponse(pages=[PageItem.from_page(p) for p in pages])
