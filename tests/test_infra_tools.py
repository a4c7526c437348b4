"""Tests for infrastructure tools."""

from __future__ import annotations

import pytest

import drawing_analysis_mcp.config as cfg_mod
import drawing_analysis_mcp.tools.infra as infra_mod
from drawing_analysis_mcp.profiles import resolve_profile
from tests.conftest import unwrap_tool

infra_config = unwrap_tool(infra_mod.infra_config)
infra_configure = unwrap_tool(infra_mod.infra_configure)


@pytest.fixture(autouse=True)
def _mutations_enabled(monkeypatch):
    monkeypatch.setenv("INFRA_MUTATIONS_ENABLED", "true")
    cfg_mod._config = None


class TestInfraConfigure:
    async def test_updates_runtime_config(self):
        out = await infra_configure(model="gemini-test", thinking_level="medium", instrument_temperature=0.2)
        cfg = out["current_config"]
        assert cfg["default_model"] == "gemini-test"
        assert cfg["default_thinking_level"] == "medium"
        assert cfg["instrument_temperature"] == 0.2
        assert "gemini_api_key" not in cfg

    async def test_changes_reach_pipeline_profiles(self):
        await infra_configure(flash_model="flash-next", free_drawing_temperature=1.1)
        profile = resolve_profile("free_drawing")
        assert profile.model == "flash-next"
        assert profile.temperature == 1.1

    async def test_redacts_all_secret_fields(self, monkeypatch):
        monkeypatch.setenv("DRAWING_ACTIVITY_API_KEY", "activity-secret")
        monkeypatch.setenv("INFRA_ADMIN_TOKEN", "infra-secret")
        cfg_mod._config = None

        out = await infra_configure()
        cfg = out["current_config"]

        assert "gemini_api_key" not in cfg
        assert "activity_api_key" not in cfg
        assert "infra_admin_token" not in cfg
        assert "activity-secret" not in str(out)

    async def test_invalid_thinking_level_returns_error(self):
        out = await infra_configure(thinking_level="ultra")
        assert out["category"] == "REQUEST_INVALID"
        assert out["field"] == "default_thinking_level"
        assert "Invalid thinking level" in out["error"]
        assert out["retryable"] is False
        assert cfg_mod.get_config().default_thinking_level == "low"

    async def test_preset_sets_both_models(self):
        out = await infra_configure(preset="stable")
        cfg = out["current_config"]
        assert cfg["default_model"] == "gemini-3-pro-preview"
        assert cfg["flash_model"] == "gemini-3-flash-preview"
        assert out["active_preset"] == "stable"

    async def test_preset_with_model_override(self):
        out = await infra_configure(preset="budget", model="gemini-custom")
        assert out["current_config"]["default_model"] == "gemini-custom"
        assert out["active_preset"] is None

    async def test_invalid_preset_returns_error(self):
        out = await infra_configure(preset="turbo")
        assert "Unknown preset" in out["error"]
        assert out["field"] == "preset"

    async def test_mutations_disabled_by_policy(self, monkeypatch):
        monkeypatch.setenv("INFRA_MUTATIONS_ENABLED", "false")
        cfg_mod._config = None
        out = await infra_configure(model="gemini-other")
        assert out["category"] == "PERMISSION_DENIED"
        assert cfg_mod.get_config().default_model != "gemini-other"

    async def test_admin_token_required_when_configured(self, monkeypatch):
        monkeypatch.setenv("INFRA_ADMIN_TOKEN", "s3cret")
        cfg_mod._config = None

        denied = await infra_configure(model="gemini-other", auth_token="wrong")
        assert denied["category"] == "PERMISSION_DENIED"

        allowed = await infra_configure(model="gemini-other", auth_token="s3cret")
        assert allowed["current_config"]["default_model"] == "gemini-other"

    async def test_read_only_call_skips_policy(self, monkeypatch):
        monkeypatch.setenv("INFRA_MUTATIONS_ENABLED", "false")
        cfg_mod._config = None
        out = await infra_configure()
        assert "available_presets" in out


class TestInfraConfig:
    async def test_reports_default_preset(self):
        out = await infra_config()
        assert out["active_preset"] == "best"
        assert set(out["available_presets"]) == {"best", "stable", "budget"}
        assert out["current_config"]["analysis_timeout_seconds"] == 120.0
