"""Optional MLflow tracing for drawing analyses.

``mlflow.gemini.autolog()`` records each Gemini call as a child span; the
``trace()`` decorator wraps MCP tool entrypoints as ``TOOL`` root spans.
The import is guarded: without ``mlflow-tracing`` installed every helper
here is a no-op.

Env vars (all optional):
    MLFLOW_TRACKING_URI: Trace store. Empty = tracing disabled.
    MLFLOW_EXPERIMENT_NAME: Experiment name (default ``drawing-analysis-mcp``).
    GEMINI_TRACING_ENABLED: ``"false"`` force-disables even with a URI.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .config import ServerConfig, get_config

logger = logging.getLogger(__name__)

try:
    import mlflow
    import mlflow.gemini

    _HAS_MLFLOW = True
except ImportError:
    _HAS_MLFLOW = False


def is_enabled() -> bool:
    """True when mlflow-tracing is importable and tracing is configured on."""
    return _HAS_MLFLOW and get_config().tracing_enabled


def trace(
    func: Callable | None = None,
    *,
    name: str | None = None,
    span_type: str | None = None,
    attributes: dict[str, Any] | None = None,
) -> Callable:
    """``@mlflow.trace`` when tracing is on, identity otherwise.

    Usage::

        @trace(name="drawing_analyze", span_type="TOOL")
        async def drawing_analyze(...): ...
    """
    if not is_enabled():
        return func if func is not None else (lambda f: f)
    return mlflow.trace(func, name=name, span_type=span_type, attributes=attributes)


def request_attributes(task_type: str, language: str, image_count: int) -> dict[str, Any]:
    """Span attributes describing one analysis request (no image data, no PII)."""
    return {
        "drawing.task_type": task_type,
        "drawing.language": language,
        "drawing.image_count": image_count,
    }


def tag_current_span(attributes: dict[str, Any]) -> None:
    """Attach *attributes* to the active span; no-op without tracing."""
    if not is_enabled():
        return
    span = mlflow.get_current_active_span()
    if span is not None:
        span.set_attributes(attributes)


def setup(cfg: ServerConfig | None = None) -> None:
    """Point MLflow at the tracking store and enable Gemini autologging.

    Failures are logged and swallowed so the server still starts.
    """
    if not is_enabled():
        return
    cfg = cfg or get_config()
    try:
        mlflow.set_tracking_uri(cfg.mlflow_tracking_uri)
        mlflow.set_experiment(cfg.mlflow_experiment_name)
        mlflow.gemini.autolog()
        logger.info(
            "MLflow tracing enabled (uri=%s, experiment=%s)",
            cfg.mlflow_tracking_uri, cfg.mlflow_experiment_name,
        )
    except Exception:
        logger.warning("MLflow tracing setup failed — continuing without tracing", exc_info=True)


def shutdown() -> None:
    """Flush traces still queued for async logging."""
    if not is_enabled():
        return
    try:
        mlflow.flush_trace_async_logging()
    except Exception:
        logger.warning("MLflow trace flush failed", exc_info=True)
