"""Reply notification infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire

from masacarri.adapter.mail import (
    DisabledNotificationQueue,
    MailClient,
    MailNotificationDispatcher,
    SmtpMailClient,
)
from masacarri.config import NotificationSettings
from masacarri.domain.repository import RepositoryScope
from masacarri.domain.service import NotificationQueue
from masacarri.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification component base."""

    __mock_component__ = "notification"


class ProdNotificationProvider(NotificationProvider):
    """Production notification provider delivering mail over SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_mail_client(self, settings: NotificationSettings) -> MailClient:
        """Provide SMTP mail client."""
        return SmtpMailClient(settings)

    @provide(scope=Scope.APP)
    async def get_notification_queue(
        self,
        settings: NotificationSettings,
        mail_client: MailClient,
        repository_scope: RepositoryScope,
    ) -> AsyncIterator[NotificationQueue]:
        """Provide the reply notification queue.

        The worker pool lives as long as the container; disabled
        notifications get a queue that drops every task.
        """
        if not settings.enabled:
            logfire.info("Reply notifications disabled")
            yield DisabledNotificationQueue()
            return

        dispatcher = MailNotificationDispatcher(
            mail_client=mail_client,
            repository_scope=repository_scope,
            settings=settings,
        )
        await dispatcher.start()
        try:
            yield dispatcher
        finally:
            await dispatcher.stop()
