"""Supabase client factory."""

from __future__ import annotations

from sherpa.core.config import Settings
from sherpa.core.errors import ConfigurationError
from supabase import AsyncClient, create_async_client


def _normalize_supabase_url(url: str) -> str:
    """Ensure the Supabase URL has a trailing slash (required by the storage client)."""
    return url.rstrip("/") + "/"


async def create_supabase_client(settings: Settings) -> AsyncClient:
    """Create the Supabase client used for the insights table."""
    missing: list[str] = []
    if not settings.supabase_url:
        missing.append("SUPABASE_URL")
    if not settings.supabase_key:
        missing.append("SUPABASE_KEY")
    if missing:
        missing_str = ", ".join(missing)
        raise ConfigurationError(f"Supabase is not configured. Missing {missing_str}.")

    return await create_async_client(_normalize_supabase_url(settings.supabase_url), settings.supabase_key)
