"""PostgreSQL implementation of Comment repository."""

from typing import Any, List, Optional

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from masacarri.domain.model import Comment, CommentWithReplies
from masacarri.domain.repository import CommentRepository
from masacarri.domain.value import CommentId, PageId
from masacarri.persistence.mappers import (
    comment_to_dict,
    row_to_comment,
    row_to_comment_with_replies,
)
from masacarri.persistence.tables import comments_table


def _with_reply_counts(*criteria: Any) -> Select:
    """Select comments matching ``criteria`` with their direct reply counts.

    Children are joined from the whole table, so counts are not limited to
    the comments the criteria select.
    """
    children = comments_table.alias("child_comments")
    return (
        select(comments_table, func.count(children.c.id).label("count_replies"))
        .select_from(
            comments_table.outerjoin(
                children, comments_table.c.id == children.c.reply_to
            )
        )
        .where(*criteria)
        .group_by(comments_table.c.id)
    )


def _ancestor_closure(page_id: PageId, comment_id: CommentId):
    """Recursive CTE of a comment and every comment above it.

    UNION (not UNION ALL) stops on a revisited row, so a corrupted cycle
    terminates instead of recursing forever.
    """
    tree = (
        select(comments_table.c.id, comments_table.c.reply_to)
        .where(comments_table.c.id == comment_id)
        .where(comments_table.c.page_id == page_id)
        .cte("tree", recursive=True)
    )
    parents = comments_table.alias("parents")
    return tree.union(
        select(parents.c.id, parents.c.reply_to).where(
            parents.c.id == tree.c.reply_to
        )
    )


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_page(
        self, stmt: Select, offset: int, limit: int
    ) -> List[CommentWithReplies]:
        # id breaks timestamp ties so OFFSET pages never overlap
        stmt = (
            stmt.order_by(comments_table.c.created_time, comments_table.c.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_with_replies(dict(row)) for row in result.mappings()]

    async def _count(self, stmt: Select) -> int:
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_page_id(self, comment_id: CommentId) -> Optional[PageId]:
        """Find the page a comment belongs to."""
        stmt = select(comments_table.c.page_id).where(
            comments_table.c.id == comment_id
        )
        result = await self.session.execute(stmt)
        page_id = result.scalar()
        return PageId(page_id) if page_id else None

    async def find_with_replies(
        self, page_id: PageId, comment_id: CommentId
    ) -> Optional[CommentWithReplies]:
        """Find one comment of a page together with its reply count."""
        stmt = _with_reply_counts(
            comments_table.c.id == comment_id,
            comments_table.c.page_id == page_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment_with_replies(dict(row)) if row else None

    async def list_by_page(
        self, page_id: PageId, offset: int, limit: int
    ) -> List[CommentWithReplies]:
        """List every comment of a page."""
        stmt = _with_reply_counts(comments_table.c.page_id == page_id)
        return await self._fetch_page(stmt, offset, limit)

    async def list_replies(
        self, page_id: PageId, comment_id: CommentId, offset: int, limit: int
    ) -> List[CommentWithReplies]:
        """List the direct replies to a comment."""
        stmt = _with_reply_counts(
            comments_table.c.reply_to == comment_id,
            comments_table.c.page_id == page_id,
        )
        return await self._fetch_page(stmt, offset, limit)

    async def list_context(
        self, page_id: PageId, comment_id: CommentId, offset: int, limit: int
    ) -> List[CommentWithReplies]:
        """List a comment and its ancestors in one recursive query."""
        tree = _ancestor_closure(page_id, comment_id)
        stmt = _with_reply_counts(comments_table.c.id.in_(select(tree.c.id)))
        return await self._fetch_page(stmt, offset, limit)

    async def count_by_page(self, page_id: PageId) -> int:
        """Count all comments of a page."""
        return await self._count(
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.page_id == page_id)
        )

    async def count_replies(self, page_id: PageId, comment_id: CommentId) -> int:
        """Count the direct replies to a comment."""
        return await self._count(
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.reply_to == comment_id)
            .where(comments_table.c.page_id == page_id)
        )

    async def count_context(self, page_id: PageId, comment_id: CommentId) -> int:
        """Count a comment plus all of its ancestors."""
        tree = _ancestor_closure(page_id, comment_id)
        return await self._count(select(func.count()).select_from(tree))

    async def insert(self, comment: Comment) -> None:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
