"""Page domain service."""

from uuid import uuid4

import logfire

from masacarri.domain.error import InternalError
from masacarri.domain.model.page import Page
from masacarri.domain.repository import PageRepository
from masacarri.domain.value import PageId

from .base import Service


class PageService(Service):
    """Domain service for page operations."""

    def __init__(self, page_repository: PageRepository) -> None:
        """Initialize page service.

        Args:
            page_repository: Page repository
        """
        self.page_repository = page_repository

    async def get_page_by_id(self, page_id: PageId) -> Page | None:
        """Get a page by ID.

        Args:
            page_id: Page ID

        Returns:
            Page if found, None otherwise
        """
        with logfire.span("page_service.get_page_by_id", page_id=str(page_id)):
            page = await self.page_repository.find_by_id(page_id)
            if page is None:
                logfire.warn("Page not found", page_id=str(page_id))
            return page

    async def list_pages(self) -> list[Page]:
        """List every page."""
        with logfire.span("page_service.list_pages"):
            pages = await self.page_repository.find_all()
            logfire.info("Pages listed", count=len(pages))
            return pages

    async def create_page(self, title: str, page_url: str, published: bool) -> Page:
        """Create a page.

        Raises:
            InternalError: If the inserted page cannot be read back
        """
        with logfire.span("page_service.create_page", page_url=page_url):
            page = Page(
                id=PageId(uuid4()),
                title=title,
                page_url=page_url,
                published=published,
            )
            await self.page_repository.insert(page)

            saved = await self.page_repository.find_by_id(page.id)
            if saved is None:
                raise InternalError(f"Inserted page {page.id} not found")

            logfire.info("Page created", page_id=str(saved.id), page_url=page_url)
            return saved

    async def update_page(
        self, page_id: PageId, title: str, page_url: str, published: bool
    ) -> None:
        """Overwrite a page's metadata."""
        with logfire.span("page_service.update_page", page_id=str(page_id)):
            await self.page_repository.update(
                Page(id=page_id, title=title, page_url=page_url, published=published)
            )
            logfire.info("Page updated", page_id=str(page_id), published=published)

    async def delete_page(self, page_id: PageId) -> None:
        """Delete a page together with its comments."""
        with logfire.span("page_service.delete_page", page_id=str(page_id)):
            await self.page_repository.delete(page_id)
            logfire.info("Page deleted", page_id=str(page_id))
