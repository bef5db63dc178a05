"""
Email and notification infrastructure.
Handles email templates, SMTP service, and notification delivery.
"""

from .email_service import SMTPEmailService, EmailDeliveryError, get_email_service
from .template_loader import EmailTemplateLoader, get_template_loader

__all__ = [
    "SMTPEmailService",
    "EmailDeliveryError",
    "get_email_service",
    "EmailTemplateLoader",
    "get_template_loader"
]
