from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import RequestResponseEndpoint
from starlette.responses import Response

from sherpa.core.constants import MAX_REQUEST_BYTES
from sherpa.core.errors import AppError, RequestTooLargeError
from sherpa.core.handlers import handle_app_error
from sherpa.core.logging import log_context

logger = logging.getLogger(__name__)


async def _enforce_request_size(request: Request) -> None:
    content_length = request.headers.get("content-length")
    if content_length:
        try:
            if int(content_length) > MAX_REQUEST_BYTES:
                raise RequestTooLargeError("Request body too large.")
        except ValueError:
            pass

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > MAX_REQUEST_BYTES:
            raise RequestTooLargeError("Request body too large.")

    request._body = bytes(body)


async def log_requests(request: Request, call_next: RequestResponseEndpoint) -> Response:
    start = time.perf_counter()
    request_id = request.headers.get("X-Request-Id") or uuid.uuid4().hex
    request.state.request_id = request_id

    with log_context(request_id=request_id, method=request.method, path=request.url.path):
        try:
            await _enforce_request_size(request)
        except AppError as exc:
            # Raised outside the router, so the app-level handlers would not see it.
            response: Response = await handle_app_error(request, exc)
        else:
            response = await call_next(request)

        response.headers["X-Request-Id"] = request_id
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %s %.2fms",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response
