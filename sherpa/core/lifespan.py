from __future__ import annotations

import asyncio
import logging
import signal
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from sherpa.core.config import Settings
from sherpa.core.errors import ConfigurationError
from sherpa.crud.supabase.insights import InsightStore
from sherpa.services.gemini import GeminiProvider
from sherpa.services.supabase import create_supabase_client

logger = logging.getLogger(__name__)

_fatal_error: BaseException | None = None


def fatal_error() -> BaseException | None:
    """Return the error that triggered a fail-fast shutdown, if any."""
    return _fatal_error


def _fail_fast(loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
    """
    Event loop exception handler for errors nothing awaited.

    The process is asked to shut down instead of continuing in an unknown
    state; ``python -m sherpa`` turns the recorded error into exit status 1.
    """
    global _fatal_error
    exc = context.get("exception")
    _fatal_error = exc or RuntimeError(str(context.get("message")))
    logger.critical("Unhandled error in event loop, shutting down: %s", context.get("message"), exc_info=exc)
    signal.raise_signal(signal.SIGTERM)


async def _create_store(settings: Settings) -> InsightStore | None:
    try:
        client = await create_supabase_client(settings)
    except ConfigurationError as exc:
        logger.warning("Insight store disabled: %s", exc.detail)
        return None
    return InsightStore(client)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the process-wide Supabase and Gemini clients once and close them on shutdown."""
    settings: Settings = app.state.settings

    if getattr(app.state, "fail_fast", False):
        asyncio.get_running_loop().set_exception_handler(_fail_fast)

    app.state.insight_store = await _create_store(settings)
    app.state.generation_provider = GeminiProvider(settings.gemini_api_key, model=settings.gemini_model)
    if not app.state.generation_provider.is_configured:
        logger.warning("GEMINI_API_KEY is not set; insight generation will be rejected")

    logger.info("Startup complete", extra={"app_env": settings.app_env})
    try:
        yield
    finally:
        if app.state.insight_store is not None:
            await app.state.insight_store.close()
        await app.state.generation_provider.close()
        logger.info("Shutdown complete")
