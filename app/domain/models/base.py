"""
Base exceptions and shared helpers for the domain layer.
"""

from datetime import datetime, timezone
from typing import Optional, Any


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when a record fails validation."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _from_epoch_seconds(seconds: float) -> Optional[datetime]:
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Convert a stored timestamp to an aware datetime.

    Accepts datetime objects, ISO-8601 strings, epoch milliseconds and
    Firestore-style ``{"seconds": ..., "nanoseconds": ...}`` maps.
    ISO strings without an offset are read in the server's local zone.
    Returns None when the value cannot be interpreted.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)

    if _is_number(value):
        return _from_epoch_seconds(value / 1000)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
        try:
            return parsed if parsed.tzinfo else parsed.astimezone()
        except (OverflowError, OSError, ValueError):
            return None

    if isinstance(value, dict):
        seconds = value.get("seconds", value.get("_seconds"))
        nanos = value.get("nanoseconds", value.get("_nanoseconds", 0)) or 0
        if _is_number(seconds) and _is_number(nanos):
            return _from_epoch_seconds(seconds + nanos / 1e9)

    return None
