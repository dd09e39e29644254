"""Page entity."""

from pydantic import Field

from masacarri.domain.model.common import DomainModel
from masacarri.domain.value import PageId


class Page(DomainModel):
    """An article that visitors comment on."""

    id: PageId
    title: str = Field(max_length=1000)
    page_url: str = Field(max_length=2000)
    published: bool = False
