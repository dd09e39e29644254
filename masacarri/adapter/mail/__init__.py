"""Mail notification adapter."""

from .client import MailClient, MailMessage, MockMailClient, SmtpMailClient
from .dispatcher import (
    DisabledNotificationQueue,
    MailNotificationDispatcher,
    RecordingNotificationQueue,
)

__all__ = [
    "DisabledNotificationQueue",
    "MailClient",
    "MailMessage",
    "MailNotificationDispatcher",
    "MockMailClient",
    "RecordingNotificationQueue",
    "SmtpMailClient",
]
