"""Page repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from masacarri.domain.model.page import Page
from masacarri.domain.value import PageId


class PageRepository(ABC):
    """Repository for Page entity."""

    @abstractmethod
    async def find_by_id(self, page_id: PageId) -> Optional[Page]:
        """Find a page by ID.

        Args:
            page_id: The page's unique identifier

        Returns:
            The page if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Page]:
        """List every page."""
        pass

    @abstractmethod
    async def insert(self, page: Page) -> None:
        """Insert a new page."""
        pass

    @abstractmethod
    async def update(self, page: Page) -> None:
        """Overwrite title, URL and published flag of an existing page.

        Updating a missing page is not an error.
        """
        pass

    @abstractmethod
    async def delete(self, page_id: PageId) -> None:
        """Delete a page and, by cascade, its comments."""
        pass
