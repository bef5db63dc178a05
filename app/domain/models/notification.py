"""
Notification domain model.
Represents an in-app notification addressed to a single user.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Dict, Any
from enum import Enum

from app.domain.models.base import ValidationError, parse_timestamp


class NotificationType(str, Enum):
    """Notification categories produced by the course features."""
    ANNOUNCEMENT = "announcement"
    ASSIGNMENT = "assignment"
    QUIZ = "quiz"
    MATERIAL = "material"
    MESSAGE = "message"
    FORUM = "forum"
    GRADE = "grade"
    DEADLINE = "deadline"


def _required_str(record: Dict[str, Any], *keys: str) -> str:
    for key in keys:
        value = record.get(key)
        if value is not None:
            if not isinstance(value, str):
                raise ValidationError(f"Field '{keys[0]}' must be a string", keys[0])
            return value
    raise ValidationError(f"Field '{keys[0]}' is required", keys[0])


def _first(record: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in record:
            return record[key]
    return None


@dataclass(frozen=True)
class Notification:
    """
    A notification record as written by the rest of the application.

    ``type`` keeps the raw stored value, which may fall outside
    NotificationType.
    """

    user_id: str
    type: str
    title: str
    message: str
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    read: bool = False
    link: Optional[str] = None
    course_id: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any], notification_id: Optional[str] = None) -> "Notification":
        """
        Build a notification from a stored row.

        Raises:
            ValidationError: If a required string field is missing or malformed
        """
        if not isinstance(record, dict):
            raise ValidationError("Notification record must be an object")

        user_id = _required_str(record, "userId", "user_id")
        if not user_id.strip():
            raise ValidationError("Field 'userId' is required", "userId")

        record_id = notification_id if notification_id is not None else record.get("id")

        return cls(
            id=str(record_id) if record_id is not None else None,
            user_id=user_id,
            type=_required_str(record, "type"),
            title=_required_str(record, "title"),
            message=_required_str(record, "message"),
            created_at=parse_timestamp(_first(record, "createdAt", "created_at")),
            read=bool(record.get("read", False)),
            link=record.get("link"),
            course_id=_first(record, "courseId", "course_id"),
        )

    @property
    def known_type(self) -> Optional[NotificationType]:
        """The matching NotificationType, or None for unrecognised values."""
        try:
            return NotificationType(self.type)
        except ValueError:
            return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "userId": self.user_id,
            "type": self.type,
            "title": self.title,
            "message": self.message,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "read": self.read,
            "link": self.link,
            "courseId": self.course_id,
        }
