"""Tests for per-category pipeline profiles."""

from __future__ import annotations

from drawing_analysis_mcp.config import ServerConfig
from drawing_analysis_mcp.models.analysis import SCHEMA_VERSION
from drawing_analysis_mcp.profiles import resolve_profile


class TestResolveProfile:
    def test_free_drawing_runs_warm_on_flash(self):
        cfg = ServerConfig(flash_model="flash-a", default_model="pro-a")
        profile = resolve_profile("free_drawing", cfg)
        assert profile.model == "flash-a"
        assert profile.temperature == 0.8
        assert profile.max_output_tokens == 8192
        assert profile.schema_version == SCHEMA_VERSION

    def test_instrument_runs_cool_on_default_model(self):
        cfg = ServerConfig(flash_model="flash-a", default_model="pro-a", default_thinking_level="high")
        profile = resolve_profile("instrument", cfg)
        assert (profile.name, profile.model) == ("instrument", "pro-a")
        assert profile.temperature == 0.4
        assert profile.max_output_tokens == 4096
        assert profile.thinking_level == "high"

    def test_uses_live_config_by_default(self, monkeypatch):
        monkeypatch.setenv("DRAWING_INSTRUMENT_TEMPERATURE", "0.25")
        assert resolve_profile("instrument").temperature == 0.25
