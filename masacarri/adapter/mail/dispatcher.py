"""Reply notification dispatcher.

Comments that reply to another comment are handed over as
``ReplyNotificationTask``s. A pool of asyncio workers picks them up, looks
up the replied-to comment and its page through a repository scope of its
own, and mails the replied-to author. Failed deliveries are retried; the
request that created the reply never waits for, or hears about, any of it.
"""

import asyncio

import logfire

from masacarri.adapter.mail.client import MailClient, MailMessage
from masacarri.config import NotificationSettings
from masacarri.domain.repository import RepositoryScope
from masacarri.domain.service.notification import (
    NotificationQueue,
    ReplyNotificationTask,
)


class MailNotificationDispatcher(NotificationQueue):
    """Worker pool delivering reply notifications by mail."""

    def __init__(
        self,
        mail_client: MailClient,
        repository_scope: RepositoryScope,
        settings: NotificationSettings,
    ) -> None:
        """Initialize dispatcher.

        Args:
            mail_client: Transport used for delivery
            repository_scope: Opens repositories independent of any request
            settings: Site name, pool size and retry count
        """
        self.mail_client = mail_client
        self.repository_scope = repository_scope
        self.settings = settings
        self._queue: asyncio.Queue[ReplyNotificationTask] | None = None
        self._workers: list[asyncio.Task] = []

    async def start(self) -> None:
        """Start the worker pool on the running event loop."""
        if self._workers:
            return
        self._queue = asyncio.Queue()
        self._workers = [
            asyncio.create_task(self._work(), name=f"reply-notifier-{n}")
            for n in range(self.settings.workers)
        ]
        logfire.info("Notification dispatcher started", workers=self.settings.workers)

    async def stop(self) -> None:
        """Cancel the workers; queued tasks are dropped."""
        for worker in self._workers:
            worker.cancel()
        await asyncio.gather(*self._workers, return_exceptions=True)
        self._workers = []
        logfire.info("Notification dispatcher stopped")

    async def join(self) -> None:
        """Wait until every submitted task has been processed."""
        if self._queue is not None:
            await self._queue.join()

    def submit(self, task: ReplyNotificationTask) -> None:
        """Enqueue a task; never blocks.

        Raises:
            RuntimeError: If the dispatcher has not been started
        """
        if self._queue is None:
            raise RuntimeError("Notification dispatcher is not running")
        self._queue.put_nowait(task)
        logfire.info(
            "Reply notification queued",
            reply_to=str(task.reply_to_id),
            comment_id=str(task.comment.id),
        )

    async def _work(self) -> None:
        queue = self._queue
        if queue is None:
            raise RuntimeError("Notification dispatcher is not running")
        while True:
            task = await queue.get()
            try:
                await self.deliver(task)
            except Exception:
                logfire.exception(
                    "Reply notification crashed",
                    reply_to=str(task.reply_to_id),
                    comment_id=str(task.comment.id),
                )
            finally:
                queue.task_done()

    async def deliver(self, task: ReplyNotificationTask) -> bool:
        """Deliver one notification, retrying failed sends.

        Returns:
            True if a mail was sent, False if the task was dropped or every
            attempt failed
        """
        with logfire.span(
            "notification_dispatcher.deliver",
            reply_to=str(task.reply_to_id),
            comment_id=str(task.comment.id),
        ):
            async with self.repository_scope.open() as repositories:
                replied_to = await repositories.comments.find_by_id(task.reply_to_id)
                page = await repositories.pages.find_by_id(task.comment.page_id)

            if replied_to is None or page is None:
                logfire.warn(
                    "Reply notification dropped, comment or page is gone",
                    reply_to=str(task.reply_to_id),
                    page_id=str(task.comment.page_id),
                )
                return False
            if not replied_to.mail_addr:
                return False

            message = MailMessage(
                recipient=replied_to.mail_addr,
                subject=f"{self.settings.site_name}: Your comment got a reply",
                body=f"Check reply to your comment: {page.page_url}",
            )

            for attempt in range(1, self.settings.retry + 1):
                try:
                    await self.mail_client.send(message)
                except Exception as e:
                    logfire.warn(
                        "Reply notification attempt failed",
                        attempt=attempt,
                        error=str(e),
                    )
                    continue
                logfire.info("Reply notification sent", attempt=attempt)
                return True

            logfire.error(
                "Reply notification given up",
                reply_to=str(task.reply_to_id),
                attempts=self.settings.retry,
            )
            return False


class DisabledNotificationQueue(NotificationQueue):
    """Queue used when mail notifications are switched off."""

    def submit(self, task: ReplyNotificationTask) -> None:
        """Log and drop the task."""
        logfire.debug(
            "Reply notification disabled, dropping task",
            reply_to=str(task.reply_to_id),
        )


class RecordingNotificationQueue(NotificationQueue):
    """Queue keeping submitted tasks in memory, for tests."""

    def __init__(self) -> None:
        self.tasks: list[ReplyNotificationTask] = []

    def submit(self, task: ReplyNotificationTask) -> None:
        """Record the task."""
        self.tasks.append(task)
