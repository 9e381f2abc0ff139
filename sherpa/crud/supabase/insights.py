"""Supabase insights CRUD."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from postgrest import APIError

from sherpa.core.constants import INSIGHTS_TABLE
from sherpa.core.errors import InvalidRequestError
from sherpa.services.supabase.helpers import first_row, raise_for_postgrest_error, rows
from supabase import AsyncClient

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Insight not found"
IMMUTABLE_FIELDS = frozenset({"id", "type"})


class InsightStore:
    """Data access for the ``insights`` table."""

    def __init__(self, client: AsyncClient) -> None:
        self._client = client

    def _table(self) -> Any:
        return self._client.table(INSIGHTS_TABLE)

    async def create(self, record: Mapping[str, Any]) -> dict[str, Any]:
        """Insert exactly the given fields and return the stored row."""
        try:
            response = await self._table().insert(dict(record)).execute()
        except APIError as exc:
            raise_for_postgrest_error(exc)

        stored = first_row(response.data)
        logger.info("insight stored", extra={"insight_id": stored.get("id"), "insight_type": stored.get("type")})
        return stored

    async def find_all(self) -> list[dict[str, Any]]:
        """Return every insight, newest first."""
        try:
            response = await self._table().select("*").order("created_at", desc=True).execute()
        except APIError as exc:
            raise_for_postgrest_error(exc)

        return rows(response.data)

    async def find_by_id(self, insight_id: str) -> dict[str, Any]:
        try:
            response = await self._table().select("*").eq("id", insight_id).limit(1).execute()
        except APIError as exc:
            raise_for_postgrest_error(exc)

        return first_row(response.data, not_found_message=NOT_FOUND_MESSAGE)

    async def update(self, insight_id: str, patch: Mapping[str, Any]) -> dict[str, Any]:
        immutable = sorted(IMMUTABLE_FIELDS.intersection(patch))
        if immutable:
            raise InvalidRequestError(f"Cannot update immutable fields: {', '.join(immutable)}")

        try:
            response = await self._table().update(dict(patch)).eq("id", insight_id).execute()
        except APIError as exc:
            raise_for_postgrest_error(exc)

        return first_row(response.data, not_found_message=NOT_FOUND_MESSAGE)

    async def delete(self, insight_id: str) -> None:
        try:
            await self._table().delete().eq("id", insight_id).execute()
        except APIError as exc:
            raise_for_postgrest_error(exc)

    async def close(self) -> None:
        """Release the PostgREST HTTP session held by the Supabase client."""
        await self._client.postgrest.aclose()
