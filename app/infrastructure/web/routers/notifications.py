"""
Notifications router.
Receives Supabase database webhooks for new notification rows and emails
the affected user.
"""

import logging
from typing import Annotated, Dict, Any, Optional
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.config import Settings, get_settings
from app.application.use_cases.notification_email_use_cases import NotificationEmailDispatcher
from app.infrastructure.web.dependencies import get_notification_dispatcher, verify_webhook_secret


logger = logging.getLogger(__name__)

router = APIRouter()


class DatabaseWebhookPayload(BaseModel):
    """Body posted by a Supabase database webhook."""
    type: str
    table: str
    schema_name: Optional[str] = Field(default=None, alias="schema")
    record: Optional[Dict[str, Any]] = None
    old_record: Optional[Dict[str, Any]] = None


@router.post("/notifications", dependencies=[Depends(verify_webhook_secret)])
async def notification_created(
    payload: DatabaseWebhookPayload,
    dispatcher: Annotated[NotificationEmailDispatcher, Depends(get_notification_dispatcher)],
    settings: Annotated[Settings, Depends(get_settings)]
) -> Dict[str, Any]:
    """
    Email the user addressed by a newly inserted notification.

    Always answers 200 once authenticated, whatever happened to the email,
    so the webhook is never retried.
    """
    if payload.type.upper() != "INSERT" or payload.table != settings.notifications_table:
        logger.debug(f"Ignoring {payload.type} webhook for table {payload.table}")
        return {"status": "ignored"}

    record = payload.record or {}
    notification_id = record.get("id")
    notification_id = str(notification_id) if notification_id is not None else None

    result = await dispatcher.dispatch(record, notification_id)

    # execute() only reports failure for exceptions outside the pipeline
    if not result.success:
        logger.error(f"Notification dispatch aborted for {notification_id}: {result.error}")
        return {"status": "failed", "notification_id": notification_id}

    return {
        "status": result.data.value,
        "notification_id": notification_id
    }
