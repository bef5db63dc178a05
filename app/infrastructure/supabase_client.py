"""
Supabase client factory.
"""

from functools import lru_cache
from supabase import create_client, Client

from app.config import Settings, get_settings


def create_supabase_client(settings: Settings) -> Client:
    """
    Create a Supabase client authenticated with the service role key.

    Raises:
        ValueError: If the Supabase URL or service key is not configured
    """
    if not settings.supabase_url or not settings.supabase_service_key:
        raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_KEY must be set")
    return create_client(settings.supabase_url, settings.supabase_service_key)


@lru_cache()
def get_supabase_client() -> Client:
    """Get cached Supabase client for the process settings."""
    return create_supabase_client(get_settings())
