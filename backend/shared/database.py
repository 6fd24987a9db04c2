"""
Database client factory for Supabase.

Provides both service-role clients (for admin operations bypassing RLS)
and caller-scoped clients (for operations respecting RLS).

Route handlers should not call these directly. They receive clients
wrapped in the capability objects from shared.access.
"""

from typing import Optional
from supabase import create_client, Client

from .config import get_settings

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SPARK_SUPABASE_URL and SPARK_SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def get_supabase_user_client(access_token: str) -> Client:
    """
    Get Supabase client authenticated as a specific user.

    A new client is built on every call. PostgREST requests carry the
    caller's access token, so Row Level Security policies apply.

    Args:
        access_token: JWT access token from Supabase Auth

    Returns:
        Supabase client scoped to the token's user
    """
    settings = get_settings()
    if not settings.supabase_url or not settings.supabase_anon_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SPARK_SUPABASE_URL and SPARK_SUPABASE_ANON_KEY environment variables."
        )

    client = create_client(
        settings.supabase_url,
        settings.supabase_anon_key,
    )
    client.postgrest.auth(access_token)
    return client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
