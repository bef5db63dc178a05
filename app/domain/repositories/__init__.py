"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .user_repository import UserProfileRepository

__all__ = [
    "UserProfileRepository",
]
