"""Server configuration via environment variables."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, field_validator

VALID_THINKING_LEVELS = {"minimal", "low", "medium", "high"}

MODEL_PRESETS: dict[str, dict[str, str]] = {
    "best": {
        "default_model": "gemini-3.1-pro-preview",
        "flash_model": "gemini-3-flash-preview",
        "label": "Max quality — 3.1 Pro for instruments, 3 Flash for free drawing",
    },
    "stable": {
        "default_model": "gemini-3-pro-preview",
        "flash_model": "gemini-3-flash-preview",
        "label": "Fallback — 3 Pro + 3 Flash (higher rate limits)",
    },
    "budget": {
        "default_model": "gemini-3-flash-preview",
        "flash_model": "gemini-3-flash-preview",
        "label": "Cost-optimized — 3 Flash for everything (highest rate limits)",
    },
}


def _resolve_tracing_enabled(flag_value: str, tracking_uri: str) -> bool:
    """Derive tracing_enabled from env vars.

    - ``GEMINI_TRACING_ENABLED=false`` → always disabled (explicit opt-out).
    - Otherwise enabled when ``MLFLOW_TRACKING_URI`` is non-empty.
    """
    if flag_value.lower() == "false":
        return False
    return bool(tracking_uri)


class ServerConfig(BaseModel):
    """Runtime configuration resolved from environment."""

    gemini_api_key: str = Field(default="")
    default_model: str = Field(default="gemini-3.1-pro-preview")
    flash_model: str = Field(default="gemini-3-flash-preview")
    default_thinking_level: str = Field(default="low")
    free_drawing_temperature: float = Field(default=0.8)
    instrument_temperature: float = Field(default=0.4)
    free_drawing_max_tokens: int = Field(default=8192)
    instrument_max_tokens: int = Field(default=4096)
    analysis_timeout_seconds: float = Field(default=120.0)
    activity_url: str = Field(default="")
    activity_api_key: str = Field(default="")
    activity_timeout_seconds: float = Field(default=10.0)
    infra_mutations_enabled: bool = Field(default=False)
    infra_admin_token: str = Field(default="")
    tracing_enabled: bool = Field(default=False)
    mlflow_tracking_uri: str = Field(default="")
    mlflow_experiment_name: str = Field(default="drawing-analysis-mcp")

    @field_validator("default_thinking_level")
    @classmethod
    def validate_thinking_level(cls, value: str) -> str:
        level = value.strip().lower()
        if level not in VALID_THINKING_LEVELS:
            allowed = ", ".join(sorted(VALID_THINKING_LEVELS))
            raise ValueError(f"Invalid thinking level '{value}'. Allowed: {allowed}")
        return level

    @field_validator("free_drawing_temperature", "instrument_temperature")
    @classmethod
    def validate_temperature(cls, value: float) -> float:
        if not 0.0 <= value <= 2.0:
            raise ValueError("Temperature must be between 0.0 and 2.0")
        return value

    @field_validator("free_drawing_max_tokens", "instrument_max_tokens")
    @classmethod
    def validate_positive_ints(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Configuration values must be >= 1")
        return value

    @field_validator("analysis_timeout_seconds", "activity_timeout_seconds")
    @classmethod
    def validate_timeouts(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("Timeout must be > 0")
        return value

    @classmethod
    def from_env(cls) -> ServerConfig:
        """Build config from environment variables."""
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
            default_model=os.getenv("GEMINI_MODEL", "gemini-3.1-pro-preview"),
            flash_model=os.getenv("GEMINI_FLASH_MODEL", "gemini-3-flash-preview"),
            default_thinking_level=os.getenv("GEMINI_THINKING_LEVEL", "low"),
            free_drawing_temperature=float(os.getenv("DRAWING_FREE_TEMPERATURE", "0.8")),
            instrument_temperature=float(os.getenv("DRAWING_INSTRUMENT_TEMPERATURE", "0.4")),
            free_drawing_max_tokens=int(os.getenv("DRAWING_FREE_MAX_TOKENS", "8192")),
            instrument_max_tokens=int(os.getenv("DRAWING_INSTRUMENT_MAX_TOKENS", "4096")),
            analysis_timeout_seconds=float(os.getenv("DRAWING_ANALYSIS_TIMEOUT", "120")),
            activity_url=os.getenv("DRAWING_ACTIVITY_URL", "").strip(),
            activity_api_key=os.getenv("DRAWING_ACTIVITY_API_KEY", ""),
            activity_timeout_seconds=float(os.getenv("DRAWING_ACTIVITY_TIMEOUT", "10")),
            infra_mutations_enabled=os.getenv("INFRA_MUTATIONS_ENABLED", "").lower() in ("1", "true", "yes"),
            infra_admin_token=os.getenv("INFRA_ADMIN_TOKEN", ""),
            tracing_enabled=_resolve_tracing_enabled(
                os.getenv("GEMINI_TRACING_ENABLED", ""),
                os.getenv("MLFLOW_TRACKING_URI", ""),
            ),
            mlflow_tracking_uri=os.getenv("MLFLOW_TRACKING_URI", ""),
            mlflow_experiment_name=os.getenv("MLFLOW_EXPERIMENT_NAME", "drawing-analysis-mcp"),
        )


# Process-wide config, built lazily.
_config: ServerConfig | None = None


def get_config() -> ServerConfig:
    """Return the global config singleton, creating it on first access."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def update_config(**overrides: object) -> ServerConfig:
    """Patch the live config (used by the ``infra_configure`` tool)."""
    global _config
    cfg = get_config()
    data = cfg.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    _config = ServerConfig(**data)
    return _config
