"""SMTP mail client.

Delivery uses the blocking ``smtplib`` client in a worker thread so the
event loop keeps serving requests while a relay is slow.
"""

import asyncio
import smtplib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from email.message import EmailMessage

import logfire

from masacarri.adapter.error import MailDeliveryError
from masacarri.config import NotificationSettings


@dataclass(frozen=True)
class MailMessage:
    """A plain-text message to one recipient."""

    recipient: str
    subject: str
    body: str


class MailClient(ABC):
    """Outbound mail transport."""

    @abstractmethod
    async def send(self, message: MailMessage) -> None:
        """Deliver a message.

        Raises:
            MailDeliveryError: If the message could not be delivered
        """
        pass


class SmtpMailClient(MailClient):
    """Mail client talking to an SMTP relay."""

    def __init__(self, settings: NotificationSettings) -> None:
        """Initialize SMTP client.

        Args:
            settings: Relay host, port, credentials and encryption mode
        """
        self.settings = settings

    def _build(self, message: MailMessage) -> EmailMessage:
        email = EmailMessage()
        email["From"] = self.settings.smtp_sender
        email["To"] = message.recipient
        email["Subject"] = message.subject
        email.set_content(message.body)
        return email

    def _connect(self) -> smtplib.SMTP:
        settings = self.settings
        if settings.smtp_encryption == "tls":
            return smtplib.SMTP_SSL(
                settings.smtp_host, settings.smtp_port, timeout=settings.smtp_timeout
            )

        smtp = smtplib.SMTP(
            settings.smtp_host, settings.smtp_port, timeout=settings.smtp_timeout
        )
        if settings.smtp_encryption == "starttls":
            smtp.starttls()
        return smtp

    def _send_blocking(self, message: MailMessage) -> None:
        with self._connect() as smtp:
            if self.settings.smtp_user:
                smtp.login(self.settings.smtp_user, self.settings.smtp_password or "")
            smtp.send_message(self._build(message))

    async def send(self, message: MailMessage) -> None:
        """Deliver a message through the relay."""
        with logfire.span(
            "smtp_mail_client.send",
            smtp_host=self.settings.smtp_host,
            subject=message.subject,
        ):
            try:
                await asyncio.to_thread(self._send_blocking, message)
            except (smtplib.SMTPException, OSError) as e:
                raise MailDeliveryError(f"SMTP delivery failed: {e}") from e
            logfire.info("Mail sent", smtp_host=self.settings.smtp_host)


class MockMailClient(MailClient):
    """Mail client recording messages instead of sending them.

    The first ``failures`` sends raise, to exercise retries.
    """

    def __init__(self, failures: int = 0) -> None:
        self.failures = failures
        self.attempts = 0
        self.sent: list[MailMessage] = []

    async def send(self, message: MailMessage) -> None:
        """Record a message, failing while ``failures`` remain."""
        self.attempts += 1
        if self.failures > 0:
            self.failures -= 1
            raise MailDeliveryError("mock delivery failure")
        self.sent.append(message)
