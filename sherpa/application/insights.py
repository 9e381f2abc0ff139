from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from sherpa.core.errors import NotFoundError
from sherpa.crud.supabase.insights import NOT_FOUND_MESSAGE, InsightStore
from sherpa.schemas.insights import InsightType, LinkedinInsightRequest, TranscriptInsightRequest
from sherpa.services.gemini import GeminiProvider
from sherpa.services.prompts import build_linkedin_prompt, build_transcript_prompt

logger = logging.getLogger(__name__)


async def generate_transcript_insight(request: TranscriptInsightRequest, provider: GeminiProvider) -> str:
    prompt = build_transcript_prompt(request.transcript, request.company_name, request.attendees, request.date)
    return await provider.generate(prompt)


async def generate_linkedin_insight(request: LinkedinInsightRequest, provider: GeminiProvider) -> str:
    prompt = build_linkedin_prompt(request.linkedin_bio, request.pitch_deck, request.company_name, request.role)
    return await provider.generate(prompt)


def _new_record(insight_type: InsightType, content: str, metadata: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": str(uuid.uuid4()),
        "type": insight_type,
        "content": content,
        "metadata": metadata,
        "created_at": datetime.now(timezone.utc).isoformat(),
    }


async def create_transcript_insight(
    request: TranscriptInsightRequest,
    provider: GeminiProvider,
    store: InsightStore,
) -> dict[str, Any]:
    provider.ensure_configured()
    content = await generate_transcript_insight(request, provider)

    record = _new_record(
        "transcript",
        content,
        {
            "company_name": request.company_name,
            "attendees": request.attendees,
            "date": request.date,
        },
    )
    stored = await store.create(record)
    logger.info("transcript insight created", extra={"insight_id": record["id"]})
    return stored


async def create_linkedin_insight(
    request: LinkedinInsightRequest,
    provider: GeminiProvider,
    store: InsightStore,
) -> dict[str, Any]:
    provider.ensure_configured()
    content = await generate_linkedin_insight(request, provider)

    # Bio and deck only feed the prompt; they are not persisted.
    record = _new_record("linkedin", content, {"company_name": request.company_name, "role": request.role})
    stored = await store.create(record)
    logger.info("linkedin insight created", extra={"insight_id": record["id"]})
    return stored


async def list_insights(store: InsightStore) -> list[dict[str, Any]]:
    return await store.find_all()


async def get_insight(insight_id: str, store: InsightStore) -> dict[str, Any]:
    try:
        UUID(insight_id)
    except ValueError as exc:
        # Not a UUID, so it cannot name a stored insight.
        raise NotFoundError(NOT_FOUND_MESSAGE) from exc
    return await store.find_by_id(insight_id)
