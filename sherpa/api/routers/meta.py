from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Request

from sherpa.application.meta import connection_test, echo, health_status
from sherpa.schemas.meta import ConnectionTestResponse, EchoResponse, HealthResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return await health_status()


@router.get("/test", response_model=ConnectionTestResponse)
async def test_connection(request: Request) -> ConnectionTestResponse:
    return await connection_test(request.app.state.settings)


@router.post("/test-post", response_model=EchoResponse)
async def test_post(payload: Annotated[Any, Body()] = None) -> EchoResponse:
    return await echo(payload)
