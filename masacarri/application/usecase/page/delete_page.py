"""Delete page use case."""

from uuid import UUID

from pydantic import BaseModel

from masacarri.domain.service import PageService
from masacarri.domain.value import PageId


class DeletePageRequest(BaseModel):
    """Delete page request."""

    page_id: UUID


class DeletePageUseCase:
    """Use case for deleting a page along with its comments."""

    def __init__(self, page_service: PageService) -> None:
        self.page_service = page_service

    async def execute(self, request: DeletePageRequest) -> None:
        await self.page_service.delete_page(PageId(request.page_id))
