"""
Database client factory for Supabase.

The service-role client is created once at application startup and
handed to the repositories; nothing in this module caches it globally.
"""

from supabase import acreate_client, AsyncClient

from .config import Settings


async def create_supabase_client(settings: Settings) -> AsyncClient:
    """
    Create a Supabase client with the service role key (bypasses RLS).

    Ownership is enforced by the repositories, which always filter
    on the authenticated owner's email.

    Args:
        settings: Application settings with Supabase credentials

    Returns:
        Async Supabase client
    """
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )

    return await acreate_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
    )
