"""Supabase service utilities."""

from sherpa.services.supabase.helpers import first_row, raise_for_postgrest_error, rows
from sherpa.services.supabase.supabase import create_supabase_client

__all__ = [
    "create_supabase_client",
    "first_row",
    "raise_for_postgrest_error",
    "rows",
]
