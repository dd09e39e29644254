"""Comment domain service."""

import asyncio
import ipaddress
from datetime import datetime, timezone
from uuid import uuid4

import logfire

from masacarri.domain.error import InternalError, ValidationError
from masacarri.domain.model.comment import (
    NO_DELETE_KEY,
    Comment,
    CommentView,
    CommentWithReplies,
    project_comment,
)
from masacarri.domain.repository import CommentRepository
from masacarri.domain.value import (
    CommentId,
    CommentScope,
    ContextScope,
    FullPage,
    PageId,
    Pagination,
    ReplyScope,
)

from .base import Service
from .hashing_service import HashingService
from .notification import NotificationQueue, ReplyNotificationTask


def _empty_to_none(value: str | None) -> str | None:
    return value if value else None


class CommentService(Service):
    """Domain service for comment threads.

    Retrieval picks one query shape per scope:

    - ``FullPage``: every comment of the page
    - ``ReplyScope``: direct replies to one comment
    - ``ContextScope``: one comment and its ancestors up to the thread root

    Each listed comment carries its direct reply count over the whole page.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        hashing_service: HashingService,
        notification_queue: NotificationQueue,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            hashing_service: Hashing service for delete keys
            notification_queue: Hand-off point for reply notifications
        """
        self.comment_repository = comment_repository
        self.hashing_service = hashing_service
        self.notification_queue = notification_queue

    async def list_comments(
        self, page_id: PageId, scope: CommentScope, pagination: Pagination
    ) -> list[CommentView]:
        """List one page of comments in creation order.

        Args:
            page_id: Owning page
            scope: Which part of the thread to list
            pagination: Page size and index

        Returns:
            Projected comments, at most ``pagination.per_page`` of them
        """
        with logfire.span(
            "comment_service.list_comments",
            page_id=str(page_id),
            scope=scope.kind,
            per_page=pagination.per_page,
            page_index=pagination.page_index,
        ):
            offset, limit = pagination.offset, pagination.limit

            if isinstance(scope, ReplyScope):
                rows = await self.comment_repository.list_replies(
                    page_id, scope.comment_id, offset, limit
                )
            elif isinstance(scope, ContextScope):
                rows = await self.comment_repository.list_context(
                    page_id, scope.comment_id, offset, limit
                )
            elif isinstance(scope, FullPage):
                rows = await self.comment_repository.list_by_page(
                    page_id, offset, limit
                )
            else:
                raise InternalError(f"Unknown comment scope: {scope!r}")

            logfire.info(
                "Comments listed",
                page_id=str(page_id),
                scope=scope.kind,
                count=len(rows),
            )
            return [self._project(row) for row in rows]

    async def count_comments(self, page_id: PageId, scope: CommentScope) -> int:
        """Count the comments a listing with the same scope would span.

        For ``ContextScope`` this is the size of the ancestor closure,
        target included.
        """
        with logfire.span(
            "comment_service.count_comments", page_id=str(page_id), scope=scope.kind
        ):
            if isinstance(scope, ReplyScope):
                count = await self.comment_repository.count_replies(
                    page_id, scope.comment_id
                )
            elif isinstance(scope, ContextScope):
                count = await self.comment_repository.count_context(
                    page_id, scope.comment_id
                )
            elif isinstance(scope, FullPage):
                count = await self.comment_repository.count_by_page(page_id)
            else:
                raise InternalError(f"Unknown comment scope: {scope!r}")

            logfire.info(
                "Comments counted", page_id=str(page_id), scope=scope.kind, count=count
            )
            return count

    async def get_comment(
        self, page_id: PageId, comment_id: CommentId
    ) -> CommentView | None:
        """Get one comment of a page with its reply count.

        Returns:
            The projected comment, None if no comment matches both IDs
        """
        with logfire.span(
            "comment_service.get_comment",
            page_id=str(page_id),
            comment_id=str(comment_id),
        ):
            row = await self.comment_repository.find_with_replies(page_id, comment_id)
            if row is None:
                logfire.warn(
                    "Comment not found",
                    page_id=str(page_id),
                    comment_id=str(comment_id),
                )
                return None
            return self._project(row)

    async def create_comment(
        self,
        page_id: PageId,
        display_name: str,
        content: str,
        submitter_ip: str,
        reply_to: CommentId | None = None,
        site_url: str | None = None,
        mail_addr: str | None = None,
        delete_key: str | None = None,
    ) -> CommentView:
        """Create a comment on a page or a reply to another comment.

        Args:
            page_id: Page commented on (must exist)
            display_name: Author name shown publicly
            content: Comment text
            submitter_ip: Peer address of the submitting client
            reply_to: Comment replied to, None for a top-level comment
            site_url: Author web site, empty means absent
            mail_addr: Address notified of replies, empty means absent
            delete_key: Secret for self-service deletion, stored hashed

        Returns:
            The created comment

        Raises:
            ValidationError: If the reply target is on another page or a
                required field is empty
            InternalError: If the reply target or the inserted row vanished
        """
        with logfire.span(
            "comment_service.create_comment",
            page_id=str(page_id),
            reply_to=str(reply_to) if reply_to else None,
        ):
            if reply_to is not None:
                reply_to_page_id = await self.comment_repository.find_page_id(
                    reply_to
                )
                if reply_to_page_id is None:
                    # Callers only reference existing comments; a miss here
                    # means it was deleted between render and submit.
                    raise InternalError(f"Reply target {reply_to} does not exist")
                if reply_to_page_id != page_id:
                    logfire.warn(
                        "Reply target belongs to another page",
                        reply_to=str(reply_to),
                        reply_to_page_id=str(reply_to_page_id),
                        page_id=str(page_id),
                    )
                    raise ValidationError("You replied to an invalid comment.")

            if not display_name.strip():
                raise ValidationError("Display name is required.")
            if not content.strip():
                raise ValidationError("Comment text is required.")

            try:
                ip_addr = ipaddress.ip_network(submitter_ip)
            except ValueError as e:
                raise InternalError(f"Invalid submitter address: {submitter_ip}") from e

            hashed_delete_key = (
                await asyncio.to_thread(self.hashing_service.hash, delete_key)
                if delete_key
                else NO_DELETE_KEY
            )

            comment = Comment(
                id=CommentId(uuid4()),
                page_id=page_id,
                reply_to=reply_to,
                ip_addr=ip_addr,
                display_name=display_name,
                site_url=_empty_to_none(site_url),
                mail_addr=_empty_to_none(mail_addr),
                content=content,
                delete_key=hashed_delete_key,
                flags=0,
                created_time=datetime.now(timezone.utc),
            )
            await self.comment_repository.insert(comment)

            saved = await self.comment_repository.find_by_id(comment.id)
            if saved is None:
                raise InternalError(f"Inserted comment {comment.id} not found")

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                page_id=str(page_id),
                reply_to=str(reply_to) if reply_to else None,
            )

            if saved.reply_to is not None:
                self._notify_reply(saved)

            return project_comment(saved)

    def _notify_reply(self, comment: Comment) -> None:
        """Hand a reply notification to the queue, never failing the caller."""
        task = ReplyNotificationTask(reply_to_id=comment.reply_to, comment=comment)
        try:
            self.notification_queue.submit(task)
        except Exception:
            logfire.exception(
                "Failed to submit reply notification",
                comment_id=str(comment.id),
                reply_to=str(comment.reply_to),
            )

    @staticmethod
    def _project(row: CommentWithReplies) -> CommentView:
        return project_comment(row.comment, row.count_replies)
