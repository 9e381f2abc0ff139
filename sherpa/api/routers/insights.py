from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from sherpa.api.deps.clients import get_generation_provider, get_insight_store
from sherpa.application.insights import (
    create_linkedin_insight,
    create_transcript_insight,
    get_insight,
    list_insights,
)
from sherpa.crud.supabase.insights import InsightStore
from sherpa.schemas.errors import ErrorResponse
from sherpa.schemas.insights import InsightResponse, LinkedinInsightRequest, TranscriptInsightRequest
from sherpa.services.gemini import GeminiProvider

router = APIRouter(prefix="/api", tags=["insights"])

_CREATE_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Missing or empty required fields."},
    500: {"model": ErrorResponse, "description": "Provider not configured, generation or persistence failed."},
}


@router.post("/transcript-insight", response_model=InsightResponse, responses=_CREATE_RESPONSES)
async def transcript_insight(
    request: TranscriptInsightRequest,
    provider: Annotated[GeminiProvider, Depends(get_generation_provider)],
    store: Annotated[InsightStore, Depends(get_insight_store)],
) -> dict[str, Any]:
    return await create_transcript_insight(request, provider, store)


@router.post("/linkedin-insight", response_model=InsightResponse, responses=_CREATE_RESPONSES)
async def linkedin_insight(
    request: LinkedinInsightRequest,
    provider: Annotated[GeminiProvider, Depends(get_generation_provider)],
    store: Annotated[InsightStore, Depends(get_insight_store)],
) -> dict[str, Any]:
    return await create_linkedin_insight(request, provider, store)


@router.get(
    "/insights",
    response_model=list[InsightResponse],
    responses={500: {"model": ErrorResponse, "description": "Insight store failed."}},
)
async def all_insights(store: Annotated[InsightStore, Depends(get_insight_store)]) -> list[dict[str, Any]]:
    return await list_insights(store)


@router.get(
    "/insights/{insight_id}",
    response_model=InsightResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Insight not found."},
        500: {"model": ErrorResponse, "description": "Insight store failed."},
    },
)
async def insight_by_id(
    insight_id: str,
    store: Annotated[InsightStore, Depends(get_insight_store)],
) -> dict[str, Any]:
    return await get_insight(insight_id, store)
