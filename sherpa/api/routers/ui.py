from __future__ import annotations

import pathlib

from fastapi import APIRouter
from fastapi.responses import FileResponse

from sherpa.core.errors import NotFoundError

router = APIRouter(tags=["ui"])

STATIC_DIR = pathlib.Path(__file__).resolve().parents[2] / "static"


@router.get("/", response_class=FileResponse, include_in_schema=False)
async def index() -> FileResponse:
    page = STATIC_DIR / "index.html"
    if not page.exists():
        raise NotFoundError("UI not found.")
    return FileResponse(page, media_type="text/html")
