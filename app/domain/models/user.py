"""
User profile domain model.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any


def _optional_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


@dataclass(frozen=True)
class UserProfile:
    """Profile fields needed to address a user by email."""

    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    username: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any], user_id: Optional[str] = None) -> "UserProfile":
        """Build a profile from a stored row; blank strings count as missing."""
        record_id = user_id if user_id is not None else record.get("id")
        return cls(
            id=str(record_id),
            email=_optional_str(record.get("email")),
            full_name=_optional_str(record.get("fullName", record.get("full_name"))),
            username=_optional_str(record.get("username")),
        )

    @property
    def display_name(self) -> str:
        """Name used to greet the user."""
        return self.full_name or self.username or "User"

    @property
    def has_email(self) -> bool:
        return self.email is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "email": self.email,
            "fullName": self.full_name,
            "username": self.username,
        }
