"""
Application layer use cases.
Business logic for the e-learning notification service.
"""

from .base_use_case import BaseUseCase, UseCaseResult
from .notification_email_use_cases import (
    NotificationEmailDispatcher,
    NotificationCreated,
    DispatcherConfig,
    DispatchOutcome,
    NOTIFICATION_SYMBOLS,
    DEFAULT_SYMBOL,
    symbol_for,
)

__all__ = [
    # Base Use Cases
    "BaseUseCase",
    "UseCaseResult",

    # Notification emails
    "NotificationEmailDispatcher",
    "NotificationCreated",
    "DispatcherConfig",
    "DispatchOutcome",
    "NOTIFICATION_SYMBOLS",
    "DEFAULT_SYMBOL",
    "symbol_for",
]
