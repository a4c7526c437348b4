"""Tests for the Gemini client pool and GeminiInvoker."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from drawing_analysis_mcp.client import GeminiClient, GeminiInvoker
from drawing_analysis_mcp.compose import compose_prompt
from drawing_analysis_mcp.errors import ModelInvocationError
from drawing_analysis_mcp.models.request import parse_request
from drawing_analysis_mcp.profiles import resolve_profile
from tests.conftest import png_b64


def _response(*parts, text=""):
    """Fake GenerateContentResponse with the given (text, thought) parts."""
    content = SimpleNamespace(parts=[SimpleNamespace(text=t, thought=th) for t, th in parts])
    return SimpleNamespace(candidates=[SimpleNamespace(content=content)], text=text)


def _client(response=None, error=None):
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=response, side_effect=error)
    return client


def _prompt(payload=None):
    req = parse_request(payload or {"taskType": "DAP", "imageBase64": png_b64()})
    return compose_prompt(req, resolve_profile(req.category))


class TestGeminiInvoker:
    async def test_returns_text_without_thinking_parts(self):
        client = _client(_response(("thinking hard", True), ('{"a": 1}', False)))
        text = await GeminiInvoker(client).invoke(_prompt())
        assert text == '{"a": 1}'

    async def test_joins_multiple_text_parts(self):
        client = _client(_response(("part one", False), ("part two", False)))
        assert await GeminiInvoker(client).invoke(_prompt()) == "part one\npart two"

    async def test_falls_back_to_response_text(self):
        response = SimpleNamespace(candidates=[], text="plain text")
        assert await GeminiInvoker(_client(response)).invoke(_prompt()) == "plain text"

    async def test_passes_profile_settings(self):
        client = _client(_response(("{}", False)))
        prompt = _prompt()
        await GeminiInvoker(client).invoke(prompt)

        kwargs = client.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == prompt.profile.model
        config = kwargs["config"]
        assert config.temperature == prompt.profile.temperature
        assert config.max_output_tokens == prompt.profile.max_output_tokens
        assert config.system_instruction == prompt.system_instruction
        assert config.thinking_config.thinking_level is not None
        contents = kwargs["contents"]
        assert contents[0].parts == prompt.parts

    async def test_failure_wrapped_once_without_retry(self):
        client = _client(error=RuntimeError("429 RESOURCE_EXHAUSTED"))
        with pytest.raises(ModelInvocationError, match="RESOURCE_EXHAUSTED") as exc_info:
            await GeminiInvoker(client).invoke(_prompt())
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert client.aio.models.generate_content.await_count == 1


class TestGeminiClientPool:
    def setup_method(self):
        GeminiClient._clients.clear()

    def teardown_method(self):
        GeminiClient._clients.clear()

    def test_reuses_client_per_key(self):
        with patch("drawing_analysis_mcp.client.genai.Client") as ctor:
            first = GeminiClient.get("key-1")
            second = GeminiClient.get("key-1")
        assert first is second
        ctor.assert_called_once_with(api_key="key-1")

    def test_missing_key_raises(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "")
        with pytest.raises(ValueError, match="No Gemini API key"):
            GeminiClient.get()

    async def test_close_all_clears_pool(self):
        client = MagicMock()
        client.aio.close = AsyncMock()
        GeminiClient._clients["k"] = client
        assert await GeminiClient.close_all() == 1
        assert GeminiClient._clients == {}
        client.close.assert_called_once()
