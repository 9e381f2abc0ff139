"""API routers."""

from sherpa.api.routers.insights import router as insights_router
from sherpa.api.routers.meta import router as meta_router
from sherpa.api.routers.ui import router as ui_router

__all__ = ["insights_router", "meta_router", "ui_router"]
