"""In-memory comment repository for testing."""

from typing import Optional

from masacarri.domain.model.comment import Comment, CommentWithReplies
from masacarri.domain.repository.comment import CommentRepository
from masacarri.domain.value import CommentId, PageId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _comments(self) -> dict[CommentId, Comment]:
        return self._store.comments

    def _count_children(self, comment_id: CommentId) -> int:
        return sum(1 for c in self._comments.values() if c.reply_to == comment_id)

    def _page(
        self, comments: list[Comment], offset: int, limit: int
    ) -> list[CommentWithReplies]:
        # Stable sort: equal timestamps keep insertion order
        comments = sorted(comments, key=lambda c: c.created_time)
        return [
            CommentWithReplies(comment=c, count_replies=self._count_children(c.id))
            for c in comments[offset : offset + limit]
        ]

    def _ancestors(self, page_id: PageId, comment_id: CommentId) -> list[Comment]:
        chain: list[Comment] = []
        seen: set[CommentId] = set()
        current = self._comments.get(comment_id)
        if current is None or current.page_id != page_id:
            return chain

        while current is not None and current.id not in seen:
            chain.append(current)
            seen.add(current.id)
            current = self._comments.get(current.reply_to) if current.reply_to else None
        return chain

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_page_id(self, comment_id: CommentId) -> Optional[PageId]:
        """Find the page a comment belongs to."""
        comment = self._comments.get(comment_id)
        return comment.page_id if comment else None

    async def find_with_replies(
        self, page_id: PageId, comment_id: CommentId
    ) -> Optional[CommentWithReplies]:
        """Find one comment of a page together with its reply count."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.page_id != page_id:
            return None
        return CommentWithReplies(
            comment=comment, count_replies=self._count_children(comment.id)
        )

    async def list_by_page(
        self, page_id: PageId, offset: int, limit: int
    ) -> list[CommentWithReplies]:
        """List every comment of a page."""
        comments = [c for c in self._comments.values() if c.page_id == page_id]
        return self._page(comments, offset, limit)

    async def list_replies(
        self, page_id: PageId, comment_id: CommentId, offset: int, limit: int
    ) -> list[CommentWithReplies]:
        """List the direct replies to a comment."""
        comments = [
            c
            for c in self._comments.values()
            if c.reply_to == comment_id and c.page_id == page_id
        ]
        return self._page(comments, offset, limit)

    async def list_context(
        self, page_id: PageId, comment_id: CommentId, offset: int, limit: int
    ) -> list[CommentWithReplies]:
        """List a comment and its ancestors."""
        return self._page(self._ancestors(page_id, comment_id), offset, limit)

    async def count_by_page(self, page_id: PageId) -> int:
        """Count all comments of a page."""
        return sum(1 for c in self._comments.values() if c.page_id == page_id)

    async def count_replies(self, page_id: PageId, comment_id: CommentId) -> int:
        """Count the direct replies to a comment."""
        return sum(
            1
            for c in self._comments.values()
            if c.reply_to == comment_id and c.page_id == page_id
        )

    async def count_context(self, page_id: PageId, comment_id: CommentId) -> int:
        """Count a comment plus all of its ancestors."""
        return len(self._ancestors(page_id, comment_id))

    async def insert(self, comment: Comment) -> None:
        """Insert a new comment."""
        self._comments[comment.id] = comment
