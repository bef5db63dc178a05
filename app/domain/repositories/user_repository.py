"""
User profile repository interface.
Defines the read contract the notification pipeline needs from the user store.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.models.user import UserProfile


class UserProfileRepository(ABC):
    """
    Read-only repository interface for user profiles.
    """

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        """
        Find a user profile by its identifier.
        Returns None when no such user exists.
        """
        pass
