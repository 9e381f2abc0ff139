from __future__ import annotations

from fastapi import Request

from sherpa.core.errors import ConfigurationError
from sherpa.crud.supabase.insights import InsightStore
from sherpa.services.gemini import MISSING_KEY_MESSAGE, GeminiProvider


def get_generation_provider(request: Request) -> GeminiProvider:
    provider: GeminiProvider | None = getattr(request.app.state, "generation_provider", None)
    if provider is None:
        raise ConfigurationError(MISSING_KEY_MESSAGE)
    return provider


def get_insight_store(request: Request) -> InsightStore:
    store: InsightStore | None = getattr(request.app.state, "insight_store", None)
    if store is None:
        raise ConfigurationError("Insight store is not configured. Set SUPABASE_URL and SUPABASE_KEY.")
    return store
