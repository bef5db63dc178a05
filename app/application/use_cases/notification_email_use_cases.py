"""
Notification email use cases.
Emails a user whenever a new notification record is created for them.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from app.config import Settings
from app.application.use_cases.base_use_case import BaseUseCase, UseCaseResult
from app.domain.models.base import ValidationError
from app.domain.models.notification import Notification, NotificationType
from app.domain.models.user import UserProfile
from app.domain.repositories.user_repository import UserProfileRepository
from app.domain.services.email_service import EmailMessage, EmailSender
from app.infrastructure.email.template_loader import EmailTemplateLoader, DEFAULT_DATETIME_FORMAT


logger = logging.getLogger(__name__)


NOTIFICATION_SYMBOLS: Dict[str, str] = {
    NotificationType.ANNOUNCEMENT.value: "📢",
    NotificationType.ASSIGNMENT.value: "📝",
    NotificationType.QUIZ.value: "📊",
    NotificationType.MATERIAL.value: "📚",
    NotificationType.MESSAGE.value: "💬",
    NotificationType.FORUM.value: "💭",
    NotificationType.GRADE.value: "⭐",
    NotificationType.DEADLINE.value: "⏰",
}
DEFAULT_SYMBOL = "🔔"


def symbol_for(notification_type: Any) -> str:
    """Decorative symbol for a notification type; unknown types get a bell."""
    if isinstance(notification_type, NotificationType):
        notification_type = notification_type.value
    if not isinstance(notification_type, str):
        return DEFAULT_SYMBOL
    return NOTIFICATION_SYMBOLS.get(notification_type, DEFAULT_SYMBOL)


class DispatchOutcome(str, Enum):
    """What happened to a single notification email."""
    SENT = "sent"
    SKIPPED_NOT_CONFIGURED = "skipped_not_configured"
    SKIPPED_INVALID = "skipped_invalid"
    SKIPPED_USER_NOT_FOUND = "skipped_user_not_found"
    SKIPPED_NO_EMAIL = "skipped_no_email"
    FAILED = "failed"


@dataclass(frozen=True)
class DispatcherConfig:
    """Sender identity and rendering options, fixed for the process lifetime."""

    sender_address: Optional[str]
    sender_name: str = "E-Learning App"
    timezone: Optional[str] = None
    datetime_format: str = DEFAULT_DATETIME_FORMAT

    @classmethod
    def from_settings(cls, settings: Settings) -> "DispatcherConfig":
        return cls(
            sender_address=settings.email_from_address if settings.email_configured else None,
            sender_name=settings.email_from_name,
            timezone=settings.timezone,
            datetime_format=settings.email_datetime_format
        )


@dataclass(frozen=True)
class NotificationCreated:
    """A newly inserted notification row as delivered by the database webhook."""

    record: Dict[str, Any]
    notification_id: Optional[str] = None


class NotificationEmailDispatcher(BaseUseCase[NotificationCreated, DispatchOutcome]):
    """
    Send one email per newly created notification.

    Delivery is best effort: every branch, including failures, finishes with a
    successful UseCaseResult so the caller never retries a possibly-sent email.
    The outcome tells callers what actually happened.
    """

    TEMPLATE = "notification"

    def __init__(
        self,
        config: DispatcherConfig,
        user_repository: UserProfileRepository,
        email_sender: EmailSender,
        template_loader: EmailTemplateLoader
    ):
        self.config = config
        self.user_repository = user_repository
        self.email_sender = email_sender
        self.template_loader = template_loader

    @property
    def is_configured(self) -> bool:
        return bool(self.config.sender_address) and self.email_sender.is_configured

    async def dispatch(
        self,
        record: Dict[str, Any],
        notification_id: Optional[str] = None
    ) -> UseCaseResult[DispatchOutcome]:
        """Handle one created notification record."""
        return await self.execute(NotificationCreated(record=record, notification_id=notification_id))

    async def _execute_business_logic(self, request: NotificationCreated) -> DispatchOutcome:
        if not self.is_configured:
            logger.warning("Email transport not configured. Skipping email send.")
            return DispatchOutcome.SKIPPED_NOT_CONFIGURED

        try:
            notification = Notification.from_record(request.record, request.notification_id)
            return await self._deliver(notification)
        except ValidationError as e:
            logger.error(f"Invalid notification {request.notification_id}: {e.message}")
            return DispatchOutcome.SKIPPED_INVALID
        except Exception as e:
            logger.error(
                f"Error sending notification email for {request.notification_id}: {str(e)}",
                exc_info=True
            )
            return DispatchOutcome.FAILED

    async def _deliver(self, notification: Notification) -> DispatchOutcome:
        user = await self.user_repository.get_by_id(notification.user_id)
        if user is None:
            logger.error(f"User not found: {notification.user_id}")
            return DispatchOutcome.SKIPPED_USER_NOT_FOUND

        if not user.has_email:
            logger.error(f"User {notification.user_id} has no email address")
            return DispatchOutcome.SKIPPED_NO_EMAIL

        message = await self.build_message(notification, user)
        await self.email_sender.send(message)

        logger.info(f"Email sent to {user.email} for notification {notification.id}")
        return DispatchOutcome.SENT

    async def build_message(self, notification: Notification, user: UserProfile) -> EmailMessage:
        """Render the email for a notification addressed to ``user``."""
        symbol = symbol_for(notification.type)
        html_content, text_content = await self.template_loader.render_email(
            self.TEMPLATE,
            {
                "symbol": symbol,
                "recipient_name": user.display_name,
                "notification": notification,
                "timezone": self.config.timezone,
                "datetime_format": self.config.datetime_format,
                "app_name": self.config.sender_name
            }
        )

        return EmailMessage(
            to=user.email,
            subject=f"{symbol} {notification.title}",
            html=html_content,
            text=text_content,
            from_address=self.config.sender_address,
            from_name=self.config.sender_name
        )
