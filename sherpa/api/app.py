from __future__ import annotations

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from sherpa import __version__
from sherpa.api.routers import insights_router, meta_router, ui_router
from sherpa.core.config import Settings, get_settings
from sherpa.core.constants import API_NAME
from sherpa.core.errors import AppError
from sherpa.core.handlers import (
    handle_app_error,
    handle_http_error,
    handle_unexpected_error,
    handle_validation_error,
)
from sherpa.core.lifespan import lifespan
from sherpa.core.logging import setup_logging
from sherpa.core.middleware import log_requests


def create_app(settings: Settings | None = None, *, fail_fast: bool = False) -> FastAPI:
    """
    Application factory for creating FastAPI instances.

    Args:
        settings: Optional settings override. If None, loads from environment.
                  Useful for testing with custom configuration.
        fail_fast: Shut the process down when an error escapes the event loop.
    """
    if settings is None:
        settings = get_settings()

    middleware: list[Middleware] = []
    if settings.cors_allow_origins:
        middleware.append(
            Middleware(
                CORSMiddleware,
                allow_origins=settings.cors_allow_origins,
                allow_credentials=True,
                allow_methods=["GET", "POST"],
                allow_headers=["*"],
            )
        )

    app = FastAPI(
        title=API_NAME,
        description="Meeting transcript and LinkedIn outreach insights",
        version=__version__,
        middleware=middleware,
        lifespan=lifespan,
    )
    app.include_router(meta_router)
    app.include_router(insights_router)
    app.include_router(ui_router)
    app.state.settings = settings
    app.state.fail_fast = fail_fast

    app.add_middleware(BaseHTTPMiddleware, dispatch=log_requests)
    app.add_exception_handler(AppError, handle_app_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, handle_http_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app


# Initialize logging once at module load
setup_logging()

# Default app instance for uvicorn (uvicorn sherpa.api.app:app)
app = create_app()
