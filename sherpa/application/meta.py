from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from sherpa.core.config import Settings
from sherpa.core.constants import API_NAME
from sherpa.schemas.meta import ConnectionTestResponse, EchoResponse, HealthResponse

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


async def health_status() -> HealthResponse:
    return HealthResponse(status="healthy", message=f"{API_NAME} is running", timestamp=_now())


async def connection_test(settings: Settings) -> ConnectionTestResponse:
    return ConnectionTestResponse(
        message="Frontend-Backend connection successful!",
        timestamp=_now(),
        frontend_url="http://localhost:3000",
        backend_url=f"http://localhost:{settings.port}",
    )


async def echo(payload: Any) -> EchoResponse:
    logger.info("test POST received", extra={"payload_type": type(payload).__name__})
    return EchoResponse(message="Test POST successful!", received_data=payload, timestamp=_now())
