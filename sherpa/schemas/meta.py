from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    message: str
    timestamp: datetime


class ConnectionTestResponse(BaseModel):
    message: str
    timestamp: datetime
    frontend_url: str
    backend_url: str


class EchoResponse(BaseModel):
    message: str
    received_data: Any
    timestamp: datetime
