"""Shared test fixtures for drawing-analysis-mcp."""

from __future__ import annotations

import base64
import json
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def unwrap_tool(tool: Any) -> Any:
    """Extract the raw coroutine from a FastMCP FunctionTool, if wrapped.

    FastMCP 2.x wraps @server.tool functions in FunctionTool (not callable).
    FastMCP 3.x preserves the original function. This helper works with both.
    """
    return getattr(tool, "fn", tool)


def png_b64(size: int = 1024) -> str:
    """Base64 of *size* bytes that sniff as PNG."""
    payload = PNG_MAGIC + b"\x00" * max(0, size - len(PNG_MAGIC))
    return base64.b64encode(payload).decode()


def model_output(**overrides: Any) -> dict:
    """A well-formed v3 model response (wire names)."""
    data: dict[str, Any] = {
        "meta": {
            "confidence": 0.72,
            "uncertaintyLevel": "low",
            "dataQualityNotes": [],
        },
        "insights": [
            {
                "title": "Warm family scene",
                "summary": "Figures stand close together and are drawn with care.",
                "evidence": ["figure_distance", "color_count"],
                "strength": "moderate",
            }
        ],
        "homeTips": [
            {"title": "Draw together", "steps": ["Pick a theme", "Talk while drawing"], "why": "Shared time"}
        ],
        "riskFlags": [],
        "traumaAssessment": None,
        "conversationGuide": {
            "openingQuestions": ["Who is in this picture?"],
            "followUpQuestions": [],
            "avoidTopics": [],
            "supportiveResponses": [],
        },
        "professionalGuidance": None,
        "trendNote": "",
    }
    data.update(overrides)
    return data


class FakeInvoker:
    """Records composed prompts and replies with a scripted text (or error)."""

    def __init__(self, response: str | dict | None = None, error: Exception | None = None) -> None:
        if isinstance(response, dict):
            response = json.dumps(response)
        self.response = response if response is not None else json.dumps(model_output())
        self.error = error
        self.prompts: list[Any] = []

    @property
    def calls(self) -> int:
        return len(self.prompts)

    async def invoke(self, prompt: Any) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True, scope="session")
def _unwrap_fastmcp_tools():
    """Patch tool modules so FunctionTool objects become directly callable."""
    import importlib
    import pkgutil

    import drawing_analysis_mcp.tools as tools_pkg

    modules = []
    for info in pkgutil.walk_packages(tools_pkg.__path__, tools_pkg.__name__ + "."):
        try:
            modules.append(importlib.import_module(info.name))
        except Exception:
            pass

    for mod in modules:
        for name in list(vars(mod)):
            obj = getattr(mod, name, None)
            if obj is not None and hasattr(obj, "fn") and not callable(obj):
                setattr(mod, name, obj.fn)


@pytest.fixture(autouse=True)
def _set_dummy_api_key(monkeypatch):
    """Ensure tests never hit real Gemini API."""
    monkeypatch.setenv("GEMINI_API_KEY", "test-key-not-real")


@pytest.fixture(autouse=True)
def _disable_tracing(monkeypatch):
    """Disable MLflow tracing in all tests to avoid real tracking-server calls."""
    monkeypatch.setenv("GEMINI_TRACING_ENABLED", "false")


@pytest.fixture(autouse=True)
def _no_activity_endpoint(monkeypatch):
    """Never POST to a real activity service."""
    monkeypatch.delenv("DRAWING_ACTIVITY_URL", raising=False)


@pytest.fixture(autouse=True)
def clean_config():
    """Reset the config singleton between tests."""
    import drawing_analysis_mcp.config as cfg_mod

    cfg_mod._config = None
    yield
    cfg_mod._config = None


@pytest.fixture()
def fake_invoker():
    """A FakeInvoker returning a valid v3 response."""
    return FakeInvoker()


@pytest.fixture()
def mock_gemini_client():
    """Patch GeminiClient.get() to return a MagicMock genai client."""
    with patch("drawing_analysis_mcp.client.GeminiClient.get") as mock_get:
        client = MagicMock()
        mock_get.return_value = client
        yield {"get": mock_get, "client": client}
