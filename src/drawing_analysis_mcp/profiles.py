"""Pipeline profiles — per-category model parameters."""

from __future__ import annotations

from dataclasses import dataclass

from .config import ServerConfig, get_config
from .models.analysis import SCHEMA_VERSION
from .types import TaskCategory


@dataclass(frozen=True)
class PipelineProfile:
    """Model settings for one task category.

    Free drawing runs warmer with a larger output budget; instruments run
    cooler on the stronger model for consistency.
    """

    name: TaskCategory
    schema_version: str
    model: str
    max_output_tokens: int
    temperature: float
    thinking_level: str


def resolve_profile(category: TaskCategory, cfg: ServerConfig | None = None) -> PipelineProfile:
    """Build the profile for *category* from the live config."""
    cfg = cfg or get_config()
    if category == "free_drawing":
        return PipelineProfile(
            name=category,
            schema_version=SCHEMA_VERSION,
            model=cfg.flash_model,
            max_output_tokens=cfg.free_drawing_max_tokens,
            temperature=cfg.free_drawing_temperature,
            thinking_level=cfg.default_thinking_level,
        )
    return PipelineProfile(
        name=category,
        schema_version=SCHEMA_VERSION,
        model=cfg.default_model,
        max_output_tokens=cfg.instrument_max_tokens,
        temperature=cfg.instrument_temperature,
        thinking_level=cfg.default_thinking_level,
    )
