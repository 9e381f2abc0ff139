"""Tests for the Gemini generation provider."""

from __future__ import annotations

import httpx
import pytest
from openai import APIConnectionError

from sherpa.core.errors import ConfigurationError, GenerationError
from sherpa.services.gemini import MISSING_KEY_MESSAGE, GeminiProvider
from tests.conftest import completion


class TestGeminiProvider:
    @pytest.mark.asyncio
    async def test_generate_returns_completion_text(self, provider, openai_client):
        assert await provider.generate("hello") == "You did well on discovery. Next time, ask about budget earlier."

        openai_client.chat.completions.create.assert_awaited_once_with(
            model="gemini-test",
            messages=[{"role": "user", "content": "hello"}],
            temperature=0.7,
        )

    @pytest.mark.asyncio
    async def test_provider_error_is_wrapped(self, provider, openai_client):
        openai_client.chat.completions.create.side_effect = APIConnectionError(
            request=httpx.Request("POST", "https://generativelanguage.googleapis.com")
        )

        with pytest.raises(GenerationError) as exc_info:
            await provider.generate("hello")

        assert exc_info.value.detail == "AI processing failed: Connection error."

    @pytest.mark.asyncio
    async def test_blank_completion_is_rejected(self, provider, openai_client):
        openai_client.chat.completions.create.return_value = completion("   ")

        with pytest.raises(GenerationError):
            await provider.generate("hello")

    @pytest.mark.asyncio
    async def test_unconfigured_provider_raises_configuration_error(self):
        provider = GeminiProvider("", model="gemini-test")

        assert provider.is_configured is False
        with pytest.raises(ConfigurationError) as exc_info:
            await provider.generate("hello")

        assert exc_info.value.detail == MISSING_KEY_MESSAGE

    @pytest.mark.asyncio
    async def test_close_releases_client(self, provider, openai_client):
        await provider.close()

        openai_client.close.assert_awaited_once()
