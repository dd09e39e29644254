"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .hashing_service import HashingService
from .jwt_service import JWTService
from .notification import NotificationQueue, ReplyNotificationTask
from .page_service import PageService
from .user_service import UserService

__all__ = [
    "CommentService",
    "HashingService",
    "JWTService",
    "NotificationQueue",
    "PageService",
    "ReplyNotificationTask",
    "Service",
    "UserService",
]
