"""
User profile repository implementation using Supabase.
"""

import asyncio
import logging
from typing import Callable, Optional
from supabase import Client

from app.domain.models.user import UserProfile
from app.domain.repositories.user_repository import UserProfileRepository

logger = logging.getLogger(__name__)


class SupabaseUserProfileRepository(UserProfileRepository):
    """
    Supabase (PostgREST) implementation of the user profile repository.

    The client is obtained from ``client_factory`` on each lookup, so a
    missing Supabase configuration surfaces as a lookup error rather than
    at construction time.
    """

    def __init__(self, client_factory: Callable[[], Client], table: str = "users"):
        self.client_factory = client_factory
        self.table = table

    async def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        """Get user profile by ID."""
        # The sync client does blocking HTTP
        response = await asyncio.to_thread(self._fetch, user_id)

        rows = response.data or []
        if not rows:
            logger.debug(f"No row in {self.table} for id {user_id}")
            return None

        return UserProfile.from_record(rows[0], user_id)

    def _fetch(self, user_id: str):
        return (
            self.client_factory().table(self.table)
            .select("*")
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
