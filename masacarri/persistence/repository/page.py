"""PostgreSQL implementation of Page repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from masacarri.domain.model import Page
from masacarri.domain.repository import PageRepository
from masacarri.domain.value import PageId
from masacarri.persistence.mappers import page_to_dict, row_to_page
from masacarri.persistence.tables import pages_table


class PostgresPageRepository(PageRepository):
    """PostgreSQL implementation of PageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, page_id: PageId) -> Optional[Page]:
        """Find a page by ID."""
        stmt = select(pages_table).where(pages_table.c.id == page_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_page(dict(row)) if row else None

    async def find_all(self) -> List[Page]:
        """List every page."""
        stmt = select(pages_table).order_by(pages_table.c.title)
        result = await self.session.execute(stmt)
        return [row_to_page(dict(row)) for row in result.mappings()]

    async def insert(self, page: Page) -> None:
        """Insert a new page."""
        stmt = pages_table.insert().values(**page_to_dict(page))
        await self.session.execute(stmt)
        await self.session.flush()

    async def update(self, page: Page) -> None:
        """Overwrite title, URL and published flag."""
        stmt = (
            pages_table.update()
            .where(pages_table.c.id == page.id)
            .values(title=page.title, page_url=page.page_url, published=page.published)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, page_id: PageId) -> None:
        """Delete a page; comments go with it through the foreign key."""
        stmt = pages_table.delete().where(pages_table.c.id == page_id)
        await self.session.execute(stmt)
        await self.session.flush()
