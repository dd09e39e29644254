"""Page use cases."""

from .common import PageItem
from .create_page import CreatePageRequest, CreatePageUseCase
from .delete_page import DeletePageRequest, DeletePageUseCase
from .list_pages import ListPagesResponse, ListPagesUseCase
from .update_page import UpdatePageRequest, UpdatePageUseCase

__all__ = [
    "CreatePageRequest",
    "CreatePageUseCase",
    "DeletePageRequest",
    "DeletePageUseCase",
    "ListPagesResponse",
    "ListPagesUseCase",
    "PageItem",
    "UpdatePageRequest",
    "UpdatePageUseCase",
]
