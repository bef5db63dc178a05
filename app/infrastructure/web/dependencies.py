"""
FastAPI dependencies for the webhook endpoints.
"""

import hmac
from functools import lru_cache
from typing import Annotated, Callable, Optional
from fastapi import Depends, Header, HTTPException, status
from supabase import Client

from app.config import Settings, get_settings
from app.application.use_cases.notification_email_use_cases import (
    NotificationEmailDispatcher,
    DispatcherConfig
)
from app.domain.services.email_service import EmailSender
from app.infrastructure.email import SMTPEmailService, get_email_service, get_template_loader
from app.infrastructure.repositories.user_repository import SupabaseUserProfileRepository
from app.infrastructure.supabase_client import get_supabase_client


def build_notification_dispatcher(
    settings: Settings,
    client_factory: Callable[[], Client] = get_supabase_client,
    email_sender: Optional[EmailSender] = None
) -> NotificationEmailDispatcher:
    """
    Wire a dispatcher from settings.
    Nothing here touches Supabase or SMTP; both are reached on first delivery.
    """
    return NotificationEmailDispatcher(
        config=DispatcherConfig.from_settings(settings),
        user_repository=SupabaseUserProfileRepository(
            client_factory,
            table=settings.users_table
        ),
        email_sender=email_sender or SMTPEmailService.from_settings(settings),
        template_loader=get_template_loader()
    )


@lru_cache()
def get_notification_dispatcher() -> NotificationEmailDispatcher:
    """
    Dependency to get the process-wide notification dispatcher.
    Built once; every collaborator is read-only afterwards.
    """
    return build_notification_dispatcher(get_settings(), email_sender=get_email_service())


async def verify_webhook_secret(
    settings: Annotated[Settings, Depends(get_settings)],
    x_webhook_secret: Annotated[Optional[str], Header()] = None
) -> None:
    """
    Reject webhook calls that do not carry the configured shared secret.
    No check is made when no secret is configured.

    Raises:
        HTTPException: If the secret is missing or wrong
    """
    expected = settings.webhook_secret
    if not expected:
        return

    if not x_webhook_secret or not hmac.compare_digest(x_webhook_secret, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid webhook secret"
        )
