"""Mock notification providers for testing."""

from dishka import Scope, provide

from masacarri.adapter.mail import MailClient, MockMailClient, RecordingNotificationQueue
from masacarri.domain.service import NotificationQueue
from masacarri.util.di.infrastructure.notification import NotificationProvider


class MockNotificationProvider(NotificationProvider):
    """Mock notification provider recording tasks instead of mailing."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mail_client(self) -> MailClient:
        """Provide mock mail client."""
        return MockMailClient()

    @provide(scope=Scope.APP)
    def get_notification_queue(self) -> NotificationQueue:
        """Provide a queue that records submitted tasks."""
        return RecordingNotificationQueue()
