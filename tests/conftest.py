"""Shared fixtures: an app wired to an in-memory store and a mocked Gemini client."""

from __future__ import annotations

import itertools
from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from sherpa.api.app import create_app
from sherpa.api.deps.clients import get_generation_provider, get_insight_store
from sherpa.core.config import Settings
from sherpa.core.errors import NotFoundError, PersistenceError
from sherpa.services.gemini import GeminiProvider

GENERATED_TEXT = "You did well on discovery. Next time, ask about budget earlier."


def completion(content: str | None) -> SimpleNamespace:
    """Build an object shaped like an OpenAI chat completion."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class FakeInsightStore:
    """In-memory stand-in for InsightStore with the same async surface."""

    def __init__(self) -> None:
        self.rows: list[dict[str, Any]] = []
        self.create_calls = 0
        self.create_error: Exception | None = None
        self.find_all_error: Exception | None = None
        self._seq = itertools.count()
        self._order: dict[str, int] = {}

    async def create(self, record: Mapping[str, Any]) -> dict[str, Any]:
        self.create_calls += 1
        if self.create_error is not None:
            raise self.create_error
        row = dict(record)
        self.rows.append(row)
        self._order[row["id"]] = next(self._seq)
        return dict(row)

    async def find_all(self) -> list[dict[str, Any]]:
        if self.find_all_error is not None:
            raise self.find_all_error
        ordered = sorted(self.rows, key=lambda row: (row["created_at"], self._order[row["id"]]), reverse=True)
        return [dict(row) for row in ordered]

    async def find_by_id(self, insight_id: str) -> dict[str, Any]:
        for row in self.rows:
            if row["id"] == insight_id:
                return dict(row)
        raise NotFoundError("Insight not found")

    async def update(self, insight_id: str, patch: Mapping[str, Any]) -> dict[str, Any]:
        row = await self.find_by_id(insight_id)
        row.update(patch)
        return row

    async def delete(self, insight_id: str) -> None:
        self.rows = [row for row in self.rows if row["id"] != insight_id]

    async def close(self) -> None:
        pass


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        gemini_api_key="test-key",
        gemini_model="gemini-test",
        supabase_url="https://example.supabase.co",
        supabase_key="test-supabase-key",
        app_env="development",
        port=8000,
    )


@pytest.fixture
def openai_client() -> MagicMock:
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=completion(GENERATED_TEXT))
    client.close = AsyncMock()
    return client


@pytest.fixture
def provider(openai_client: MagicMock) -> GeminiProvider:
    return GeminiProvider("test-key", model="gemini-test", client=openai_client)


@pytest.fixture
def store() -> FakeInsightStore:
    return FakeInsightStore()


@pytest.fixture
def app(settings: Settings, provider: GeminiProvider, store: FakeInsightStore) -> FastAPI:
    app = create_app(settings)
    app.dependency_overrides[get_generation_provider] = lambda: provider
    app.dependency_overrides[get_insight_store] = lambda: store
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def persistence_error() -> PersistenceError:
    return PersistenceError("Database error: connection refused")
