"""Reply notification hand-off.

The comment core only describes *which comment replied to which*; delivery,
retries and failures belong to the dispatcher behind ``NotificationQueue``.
"""

from abc import ABC, abstractmethod

from masacarri.domain.model.comment import Comment
from masacarri.domain.model.common import DomainModel
from masacarri.domain.value import CommentId


class ReplyNotificationTask(DomainModel):
    """A new comment replying to ``reply_to_id``."""

    reply_to_id: CommentId
    comment: Comment


class NotificationQueue(ABC):
    """Handle to an out-of-band notification worker pool."""

    @abstractmethod
    def submit(self, task: ReplyNotificationTask) -> None:
        """Enqueue a task without waiting for its delivery.

        Args:
            task: The notification to deliver
        """
        pass
