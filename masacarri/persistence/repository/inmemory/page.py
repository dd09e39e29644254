"""In-memory page repository for testing."""

from typing import Optional

from masacarri.domain.model.page import Page
from masacarri.domain.repository.page import PageRepository
from masacarri.domain.value import PageId

from .store import InMemoryStore


class InMemoryPageRepository(PageRepository):
    """In-memory implementation of PageRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, page_id: PageId) -> Optional[Page]:
        """Find a page by ID."""
        return self._store.pages.get(page_id)

    async def find_all(self) -> list[Page]:
        """List every page ordered by title."""
        return sorted(self._store.pages.values(), key=lambda p: p.title)

    async def insert(self, page: Page) -> None:
        """Insert a new page."""
        self._store.pages[page.id] = page

    async def update(self, page: Page) -> None:
        """Overwrite an existing page."""
        if page.id in self._store.pages:
            self._store.pages[page.id] = page

    async def delete(self, page_id: PageId) -> None:
        """Delete a page and cascade to its comments."""
        self._store.pages.pop(page_id, None)
        for comment_id in [
            c.id for c in self._store.comments.values() if c.page_id == page_id
        ]:
            del self._store.comments[comment_id]
