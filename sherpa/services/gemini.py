from __future__ import annotations

import logging
from typing import Any

from openai import APIError, AsyncOpenAI

from sherpa.core.constants import GEMINI_BASE_URL, GEMINI_TEMPERATURE
from sherpa.core.errors import ConfigurationError, GenerationError

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "Gemini API key not configured. Please set GEMINI_API_KEY in your environment variables."


class GeminiProvider:
    """Single-prompt text generation against Gemini's OpenAI-compatible endpoint."""

    def __init__(
        self,
        api_key: str,
        *,
        model: str,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self.model = model
        self._client = client
        if self._client is None and api_key:
            self._client = AsyncOpenAI(api_key=api_key, base_url=GEMINI_BASE_URL)

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    def ensure_configured(self) -> None:
        if not self.is_configured:
            raise ConfigurationError(MISSING_KEY_MESSAGE)

    async def generate(self, prompt: str) -> str:
        self.ensure_configured()
        assert self._client is not None

        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=GEMINI_TEMPERATURE,
            )
        except APIError as exc:
            logger.warning("Gemini request failed", extra={"model": self.model, "error_type": type(exc).__name__})
            raise GenerationError(f"AI processing failed: {exc.message}") from exc

        content: Any = response.choices[0].message.content if response.choices else None
        if not isinstance(content, str) or not content.strip():
            raise GenerationError("AI processing failed: empty response from model.")

        return content

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
