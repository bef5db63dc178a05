"""
Domain models for the e-learning notification service.
This module exports all domain entities and value objects.
"""

# Base classes
from .base import (
    DomainException,
    ValidationError,
    parse_timestamp
)

# Domain entities
from .notification import (
    Notification,
    NotificationType
)

from .user import UserProfile

from .assignment import (
    Assignment,
    AssignmentAttachment,
    Submission,
    SubmissionFile,
    SubmissionStatus,
    SubmissionSummary,
    StudentSubmissionStatus,
    StudentSubmissionState
)

__all__ = [
    # Base classes
    "DomainException",
    "ValidationError",
    "parse_timestamp",

    # Notification
    "Notification",
    "NotificationType",

    # User
    "UserProfile",

    # Assignment
    "Assignment",
    "AssignmentAttachment",
    "Submission",
    "SubmissionFile",
    "SubmissionStatus",
    "SubmissionSummary",
    "StudentSubmissionStatus",
    "StudentSubmissionState",
]
