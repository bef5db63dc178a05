"""
Domain service ports for the notification service.
"""

from .email_service import EmailMessage, EmailSender

__all__ = [
    "EmailMessage",
    "EmailSender",
]
