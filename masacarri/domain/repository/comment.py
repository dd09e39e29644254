"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from masacarri.domain.model.comment import Comment, CommentWithReplies
from masacarri.domain.value import CommentId, PageId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Listings are ordered by ``created_time`` ascending and sliced with
    ``offset``/``limit``. Every reply count is the number of comments whose
    ``reply_to`` is the listed comment, counted over the whole page rather
    than over the returned slice.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_page_id(self, comment_id: CommentId) -> Optional[PageId]:
        """Find the page a comment belongs to.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The owning page ID if the comment exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_with_replies(
        self, page_id: PageId, comment_id: CommentId
    ) -> Optional[CommentWithReplies]:
        """Find one comment of a page together with its reply count.

        Args:
            page_id: The owning page
            comment_id: The comment ID

        Returns:
            The comment with its reply count, None if no comment matches both
        """
        pass

    @abstractmethod
    async def list_by_page(
        self, page_id: PageId, offset: int, limit: int
    ) -> List[CommentWithReplies]:
        """List every comment of a page, top-level and nested."""
        pass

    @abstractmethod
    async def list_replies(
        self, page_id: PageId, comment_id: CommentId, offset: int, limit: int
    ) -> List[CommentWithReplies]:
        """List the direct replies to a comment."""
        pass

    @abstractmethod
    async def list_context(
        self, page_id: PageId, comment_id: CommentId, offset: int, limit: int
    ) -> List[CommentWithReplies]:
        """List a comment and all of its ancestors up to the thread root.

        An unknown comment yields an empty list.
        """
        pass

    @abstractmethod
    async def count_by_page(self, page_id: PageId) -> int:
        """Count all comments of a page."""
        pass

    @abstractmethod
    async def count_replies(self, page_id: PageId, comment_id: CommentId) -> int:
        """Count the direct replies to a comment."""
        pass

    @abstractmethod
    async def count_context(self, page_id: PageId, comment_id: CommentId) -> int:
        """Count a comment plus all of its ancestors."""
        pass

    @abstractmethod
    async def insert(self, comment: Comment) -> None:
        """Insert a new comment.

        Args:
            comment: The comment to insert
        """
        pass
