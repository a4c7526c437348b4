"""Tests for the optional MLflow tracing integration."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

import drawing_analysis_mcp.tracing as mod
from drawing_analysis_mcp.config import ServerConfig


def _make_config(**overrides) -> ServerConfig:
    defaults = {
        "tracing_enabled": True,
        "mlflow_tracking_uri": "http://127.0.0.1:5001",
        "mlflow_experiment_name": "drawing-analysis-mcp",
    }
    defaults.update(overrides)
    return ServerConfig(**defaults)


@pytest.fixture()
def enabled_mlflow():
    """Tracing switched on against a mock ``mlflow`` module."""
    mock_mlflow = MagicMock()
    with (
        patch.object(mod, "_HAS_MLFLOW", True),
        patch.object(mod, "mlflow", mock_mlflow, create=True),
        patch("drawing_analysis_mcp.tracing.get_config", return_value=_make_config()),
    ):
        yield mock_mlflow


class TestIsEnabled:
    def test_true_when_installed_and_enabled(self, enabled_mlflow):
        assert mod.is_enabled() is True

    def test_false_when_not_installed(self):
        with patch.object(mod, "_HAS_MLFLOW", False):
            assert mod.is_enabled() is False

    def test_false_when_config_disabled(self):
        cfg = _make_config(tracing_enabled=False)
        with (
            patch.object(mod, "_HAS_MLFLOW", True),
            patch("drawing_analysis_mcp.tracing.get_config", return_value=cfg),
        ):
            assert mod.is_enabled() is False


class TestTraceDecorator:
    def test_identity_when_disabled(self):
        async def tool():
            return 1

        with patch.object(mod, "_HAS_MLFLOW", False):
            assert mod.trace(name="x", span_type="TOOL")(tool) is tool
            assert mod.trace(tool) is tool

    def test_delegates_to_mlflow_when_enabled(self, enabled_mlflow):
        async def tool():
            return 1

        mod.trace(tool, name="drawing_analyze", span_type="TOOL")
        enabled_mlflow.trace.assert_called_once_with(
            tool, name="drawing_analyze", span_type="TOOL", attributes=None,
        )


class TestSpanAttributes:
    def test_request_attributes(self):
        assert mod.request_attributes("HTP", "en", 3) == {
            "drawing.task_type": "HTP",
            "drawing.language": "en",
            "drawing.image_count": 3,
        }

    def test_tag_current_span(self, enabled_mlflow):
        span = MagicMock()
        enabled_mlflow.get_current_active_span.return_value = span
        mod.tag_current_span({"drawing.language": "tr"})
        span.set_attributes.assert_called_once_with({"drawing.language": "tr"})

    def test_tag_without_active_span(self, enabled_mlflow):
        enabled_mlflow.get_current_active_span.return_value = None
        mod.tag_current_span({"a": 1})

    def test_tag_noop_when_disabled(self):
        with patch.object(mod, "_HAS_MLFLOW", False):
            mod.tag_current_span({"a": 1})


class TestSetupShutdown:
    def test_setup_configures_mlflow(self, enabled_mlflow):
        mod.setup()
        enabled_mlflow.set_tracking_uri.assert_called_once_with("http://127.0.0.1:5001")
        enabled_mlflow.set_experiment.assert_called_once_with("drawing-analysis-mcp")
        enabled_mlflow.gemini.autolog.assert_called_once()

    def test_setup_failure_is_logged(self, enabled_mlflow, caplog):
        enabled_mlflow.set_tracking_uri.side_effect = RuntimeError("store unreachable")
        mod.setup()
        assert "tracing setup failed" in caplog.text

    def test_setup_noop_when_disabled(self):
        mock_mlflow = MagicMock()
        with (
            patch.object(mod, "_HAS_MLFLOW", False),
            patch.object(mod, "mlflow", mock_mlflow, create=True),
        ):
            mod.setup()
        mock_mlflow.set_tracking_uri.assert_not_called()

    def test_shutdown_flushes(self, enabled_mlflow):
        mod.shutdown()
        enabled_mlflow.flush_trace_async_logging.assert_called_once()
