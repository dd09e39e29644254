"""Page response item shared by the page use cases."""

from uuid import UUID

from pydantic import BaseModel

from masacarri.domain.model import Page


class PageItem(BaseModel):
    """Page as returned to administrators."""

    id: UUID
    title: str
    page_url: str
    published: bool

    @classmethod
    def from_page(cls, page: Page) -> "PageItem":
        return cls(
            id=page.id,
            title=page.title,
            page_url=page.page_url,
            published=page.published,
        )
