"""Create page use case."""

from pydantic import BaseModel, Field

from masacarri.domain.service import PageService

from .common import PageItem


class CreatePageRequest(BaseModel):
    """Create page request."""

    title: str = Field(max_length=1000)
    page_url: str = Field(max_length=2000)
    published: bool = False


class CreatePageUseCase:
    """Use case for registering a page that visitors can comment on."""

    def __init__(self, page_service: PageService) -> None:
        """Initialize create page use case.

        Args:
            page_service: Page domain service
        """
        self.page_service = page_service

    async def execute(self, request: CreatePageRequest) -> PageItem:
        """Create the page and return it as stored.

        Raises:
            InternalError: If the page cannot be read back after insert
        """
        page = await self.page_service.create_page(
            title=request.title,
            page_url=request.page_url,
            published=request.published,
        )
        return PageItem.from_page(page)
