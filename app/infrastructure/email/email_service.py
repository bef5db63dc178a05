"""
Email service for sending notification emails.
Handles SMTP connections and MIME message assembly.
"""

import asyncio
import smtplib
import logging
from typing import Optional
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from email.utils import make_msgid

from app.config import Settings, get_settings
from app.domain.models.base import DomainException
from app.domain.services.email_service import EmailMessage, EmailSender


logger = logging.getLogger(__name__)


class EmailDeliveryError(DomainException):
    """Raised when the SMTP server rejects or fails to deliver a message."""

    def __init__(self, message: str):
        super().__init__(message, "EMAIL_DELIVERY_FAILED")


class SMTPEmailService(EmailSender):
    """Sends email through an authenticated SMTP account (Gmail by default)."""

    def __init__(
        self,
        smtp_host: str,
        smtp_port: int = 587,
        smtp_user: Optional[str] = None,
        smtp_password: Optional[str] = None,
        timeout: float = 30.0
    ):
        """Initialize email service with SMTP configuration."""
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.smtp_user = smtp_user
        self.smtp_password = smtp_password
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "SMTPEmailService":
        return cls(
            smtp_host=settings.smtp_host,
            smtp_port=settings.smtp_port,
            smtp_user=settings.smtp_user,
            smtp_password=settings.smtp_password,
            timeout=settings.smtp_timeout
        )

    @property
    def is_configured(self) -> bool:
        """Check if SMTP is properly configured."""
        return all([
            self.smtp_host,
            self.smtp_user,
            self.smtp_password
        ])

    async def send(self, message: EmailMessage) -> None:
        """
        Send an email message.

        Raises:
            EmailDeliveryError: If SMTP is not configured or delivery fails
        """
        if not self.is_configured:
            raise EmailDeliveryError("SMTP transport is not configured")

        mime_message = self._create_mime_message(message)

        # smtplib blocks, keep it off the event loop
        await asyncio.to_thread(self._send_via_smtp, mime_message, message.to)

        logger.debug(f"SMTP accepted message {mime_message['Message-ID']} for {message.to}")

    def _create_mime_message(self, message: EmailMessage) -> MIMEMultipart:
        """Create MIME message from email data."""

        mime_msg = MIMEMultipart("alternative")

        # Headers
        mime_msg["Subject"] = message.subject
        mime_msg["From"] = message.sender
        mime_msg["To"] = message.to
        mime_msg["Message-ID"] = make_msgid()

        # Plain part first so clients prefer the HTML one
        if message.text:
            mime_msg.attach(MIMEText(message.text, "plain", "utf-8"))
        mime_msg.attach(MIMEText(message.html, "html", "utf-8"))

        return mime_msg

    def _send_via_smtp(self, mime_message: MIMEMultipart, recipient: str) -> None:
        """Send email via SMTP server."""
        try:
            with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=self.timeout) as server:
                server.starttls()
                server.login(self.smtp_user, self.smtp_password)
                server.send_message(mime_message, to_addrs=[recipient])
        except (smtplib.SMTPException, OSError) as e:
            raise EmailDeliveryError(f"SMTP send failed: {str(e)}") from e


# Singleton instance
_email_service: Optional[SMTPEmailService] = None


def get_email_service() -> SMTPEmailService:
    """Get singleton email service instance."""
    global _email_service
    if _email_service is None:
        _email_service = SMTPEmailService.from_settings(get_settings())
    return _email_service
