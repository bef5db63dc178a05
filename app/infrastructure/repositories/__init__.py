"""
Infrastructure repositories module.
Contains Supabase implementations of domain repositories.
"""

from .user_repository import SupabaseUserProfileRepository

__all__ = [
    "SupabaseUserProfileRepository",
]
