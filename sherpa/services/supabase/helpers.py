"""Helpers for Supabase error handling and response parsing."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, NoReturn

from postgrest import APIError

from sherpa.core.errors import NotFoundError, PersistenceError


def raise_for_postgrest_error(exc: APIError) -> NoReturn:
    """Convert a PostgREST APIError into PersistenceError and raise."""
    message = getattr(exc, "message", None) or str(exc)
    raise PersistenceError(f"Database error: {message}") from exc


def rows(value: Any) -> list[dict[str, Any]]:
    """Return the rows of a Supabase response, or an empty list when there are none."""
    if value is None:
        return []
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes)):
        raise PersistenceError("Database error: unexpected response shape.")
    return [dict(row) for row in value if isinstance(row, Mapping)]


def first_row(value: Any, *, not_found_message: str | None = None) -> dict[str, Any]:
    """
    Extract the first row from a Supabase response.

    Raises:
        PersistenceError: If the response is malformed, or empty with no not_found_message.
        NotFoundError: If the result is empty and not_found_message is provided.
    """
    found = rows(value)
    if not found:
        if not_found_message is not None:
            raise NotFoundError(not_found_message)
        raise PersistenceError("Database error: no row returned.")
    return found[0]
