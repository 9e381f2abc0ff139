from __future__ import annotations

import logging
import traceback
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from sherpa.core.errors import AppError, RouteNotFoundError
from sherpa.core.logging import log_context

logger = logging.getLogger(__name__)


def _error_body(message: str, code: str, **extra: Any) -> dict[str, Any]:
    return {"error": message, "code": code, **extra}


def _request_context(request: Request) -> dict[str, Any]:
    return {
        "request_id": getattr(request.state, "request_id", None),
        "method": request.method,
        "path": request.url.path,
    }


def _describe_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Build a client-facing message naming every body field that failed validation."""
    fields: list[str] = []
    for error in errors:
        loc = error.get("loc") or ()
        if len(loc) < 2 or loc[0] != "body" or error.get("type") == "json_invalid":
            # Whole-body failures (missing body, malformed JSON) have no field to name.
            return "Invalid request body. Expected a JSON object."
        field = str(loc[1])
        if field not in fields:
            fields.append(field)
    return f"Missing required fields: {', '.join(fields)}"


async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    # Log only server-side failures here. Client errors are logged at the source.
    if exc.status_code >= 500:
        with log_context(**_request_context(request)):
            logger.error(
                "%s",
                exc.detail,
                extra={
                    "error_code": exc.code,
                    "status_code": exc.status_code,
                    "error_type": type(exc).__name__,
                },
            )
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.detail, exc.code))


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_validation_errors(list(exc.errors()))
    with log_context(**_request_context(request)):
        logger.warning(message, extra={"error_code": "invalid_request", "status_code": 400})
    return JSONResponse(status_code=400, content=_error_body(message, "invalid_request"))


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        not_found = RouteNotFoundError("Route not found")
        return JSONResponse(status_code=404, content=_error_body(not_found.detail, not_found.code))
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail), "http_error"),
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    with log_context(**_request_context(request)):
        logger.exception("Unhandled error", extra={"error_type": type(exc).__name__})

    body = _error_body("Internal server error", "internal_error")
    settings = getattr(request.app.state, "settings", None)
    if settings is not None and not settings.is_production:
        body["detail"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return JSONResponse(status_code=500, content=body)
