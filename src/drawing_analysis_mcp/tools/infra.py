"""Infrastructure tools — runtime configuration on a FastMCP sub-server."""

from __future__ import annotations

import logging
from typing import Annotated

from fastmcp import FastMCP
from mcp.types import ToolAnnotations
import pydantic
from pydantic import Field

from ..config import MODEL_PRESETS, ServerConfig, get_config, update_config
from ..errors import ValidationError, make_tool_error
from ..tracing import trace
from ..types import ModelPreset, ThinkingLevel

logger = logging.getLogger(__name__)

infra_server = FastMCP("infra")

_SENSITIVE_CONFIG_FIELDS = {
    "gemini_api_key",
    "activity_api_key",
    "infra_admin_token",
}


def _redacted_config() -> dict:
    """Runtime config without secret-bearing fields."""
    return get_config().model_dump(exclude=_SENSITIVE_CONFIG_FIELDS)


def _active_preset(cfg: ServerConfig) -> str | None:
    for name, preset in MODEL_PRESETS.items():
        if cfg.default_model == preset["default_model"] and cfg.flash_model == preset["flash_model"]:
            return name
    return None


def _enforce_mutation_policy(auth_token: str | None) -> None:
    """Mutations need INFRA_MUTATIONS_ENABLED and, if configured, the admin token."""
    cfg = get_config()
    if not cfg.infra_mutations_enabled:
        raise PermissionError(
            "Infra mutations are disabled by policy. "
            "Set INFRA_MUTATIONS_ENABLED=true to enable mutating infra tools."
        )
    if cfg.infra_admin_token and auth_token != cfg.infra_admin_token:
        raise PermissionError("Invalid or missing infra auth token for mutating operation.")


def _apply_overrides(overrides: dict[str, object]) -> ServerConfig:
    """Patch the live config, reporting a rejected value as a request error."""
    try:
        return update_config(**overrides)
    except pydantic.ValidationError as exc:
        err = exc.errors()[0]
        field = ".".join(str(p) for p in err["loc"]) or "config"
        raise ValidationError(field, err["msg"]) from exc


def _config_report(cfg: ServerConfig) -> dict:
    return {
        "current_config": _redacted_config(),
        "active_preset": _active_preset(cfg),
        "available_presets": {k: v["label"] for k, v in MODEL_PRESETS.items()},
    }


@infra_server.tool(annotations=ToolAnnotations(readOnlyHint=True, idempotentHint=True))
@trace(name="infra_config", span_type="TOOL")
async def infra_config() -> dict:
    """Show the active configuration (secrets redacted) and model presets."""
    return _config_report(get_config())


@infra_server.tool(
    annotations=ToolAnnotations(
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
@trace(name="infra_configure", span_type="TOOL")
async def infra_configure(
    preset: Annotated[ModelPreset | None, Field(
        description='Named model preset: "best", "stable" or "budget"',
    )] = None,
    model: Annotated[str | None, Field(
        description="Instrument model override (takes precedence over preset)",
    )] = None,
    flash_model: Annotated[str | None, Field(
        description="Free-drawing model override (takes precedence over preset)",
    )] = None,
    thinking_level: ThinkingLevel | None = None,
    free_drawing_temperature: Annotated[float | None, Field(ge=0.0, le=2.0)] = None,
    instrument_temperature: Annotated[float | None, Field(ge=0.0, le=2.0)] = None,
    analysis_timeout_seconds: Annotated[float | None, Field(gt=0)] = None,
    auth_token: Annotated[str | None, Field(
        description="Optional infra auth token (required when INFRA_ADMIN_TOKEN is configured)",
    )] = None,
) -> dict:
    """Reconfigure models and sampling at runtime.

    Changes apply to every subsequent drawing_analyze call.

    Args:
        preset: Named preset resolving to an instrument + free-drawing model pair.
        model: Instrument model ID.
        flash_model: Free-drawing model ID.
        thinking_level: "minimal", "low", "medium" or "high".
        free_drawing_temperature: Sampling temperature for free drawings.
        instrument_temperature: Sampling temperature for instruments.
        analysis_timeout_seconds: Per-analysis timeout.

    Returns:
        Dict with current_config, active_preset and available_presets.
    """
    try:
        overrides: dict[str, object] = {}
        if preset is not None:
            if preset not in MODEL_PRESETS:
                valid = ", ".join(sorted(MODEL_PRESETS))
                raise ValidationError("preset", f"Unknown preset '{preset}'. Available: {valid}")
            overrides["default_model"] = MODEL_PRESETS[preset]["default_model"]
            overrides["flash_model"] = MODEL_PRESETS[preset]["flash_model"]
        if model is not None:
            overrides["default_model"] = model
        if flash_model is not None:
            overrides["flash_model"] = flash_model
        if thinking_level is not None:
            overrides["default_thinking_level"] = thinking_level
        if free_drawing_temperature is not None:
            overrides["free_drawing_temperature"] = free_drawing_temperature
        if instrument_temperature is not None:
            overrides["instrument_temperature"] = instrument_temperature
        if analysis_timeout_seconds is not None:
            overrides["analysis_timeout_seconds"] = analysis_timeout_seconds

        if overrides:
            _enforce_mutation_policy(auth_token)
            cfg = _apply_overrides(overrides)
        else:
            cfg = get_config()
        return _config_report(cfg)
    except (ValidationError, PermissionError) as exc:
        return make_tool_error(exc)
    except Exception as exc:
        logger.error("infra_configure failed: %s", exc, exc_info=True)
        return make_tool_error(exc)
