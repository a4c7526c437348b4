"""Gemini client pool and the single-call model invoker."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from google import genai
from google.genai import types

from .config import get_config
from .errors import ModelInvocationError

if TYPE_CHECKING:
    from .compose import ComposedPrompt

logger = logging.getLogger(__name__)


class GeminiClient:
    """Process-wide Gemini client pool (one client per API key)."""

    _clients: dict[str, genai.Client] = {}

    @classmethod
    def get(cls, api_key: str | None = None) -> genai.Client:
        """Return (or create) the shared client for *api_key*."""
        key = api_key or get_config().gemini_api_key or os.getenv("GEMINI_API_KEY", "")
        if not key:
            raise ValueError("No Gemini API key — set GEMINI_API_KEY or pass api_key explicitly")
        if key not in cls._clients:
            cls._clients[key] = genai.Client(api_key=key)
            logger.info("Created Gemini client (key …%s)", key[-4:])
        return cls._clients[key]

    @classmethod
    async def close_all(cls) -> int:
        """Shut down all shared clients. Returns count closed."""
        count = 0
        for client in list(cls._clients.values()):
            try:
                await client.aio.close()
            except Exception:
                logger.debug("Async close failed", exc_info=True)
            try:
                client.close()
            except Exception:
                logger.debug("Sync close failed", exc_info=True)
            count += 1
        cls._clients.clear()
        logger.info("Closed %d Gemini client(s)", count)
        return count


def _response_text(response: types.GenerateContentResponse) -> str:
    """User-visible text of *response* with thinking parts stripped."""
    candidates = response.candidates or []
    content = candidates[0].content if candidates else None
    parts = (content.parts or []) if content else []
    text_parts = [p.text for p in parts if p.text and not getattr(p, "thought", False)]
    if text_parts:
        return "\n".join(text_parts)
    return response.text or ""


class GeminiInvoker:
    """Sends one composed prompt to Gemini and returns the raw completion.

    No retry: a transport or upstream failure is wrapped in
    :class:`ModelInvocationError` and raised once.
    """

    def __init__(self, client: genai.Client) -> None:
        self._client = client

    async def invoke(self, prompt: ComposedPrompt) -> str:
        """Run a single ``generate_content`` call for *prompt*.

        Raises:
            ModelInvocationError: On any failure of the underlying call.
        """
        profile = prompt.profile
        config = types.GenerateContentConfig(
            system_instruction=prompt.system_instruction,
            temperature=profile.temperature,
            max_output_tokens=profile.max_output_tokens,
            thinking_config=types.ThinkingConfig(thinking_level=profile.thinking_level),
        )
        logger.info(
            "Invoking %s (profile=%s, images=%d)",
            profile.model, profile.name, prompt.image_count,
        )
        try:
            response = await self._client.aio.models.generate_content(
                model=profile.model,
                contents=[types.Content(role="user", parts=prompt.parts)],
                config=config,
            )
        except Exception as exc:
            raise ModelInvocationError(f"{type(exc).__name__}: {exc}") from exc

        text = _response_text(response)
        logger.debug("Model returned %d chars", len(text))
        return text
