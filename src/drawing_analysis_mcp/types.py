"""Shared type aliases, closed vocabularies and helpers for tool parameters."""

from __future__ import annotations

import json
from typing import Annotated, Literal

from pydantic import Field


def coerce_json_param(value: str | dict | list | None, expected_type: type) -> dict | list | None:
    """Parse MCP JSON-RPC string params back to dict/list.

    MCP JSON-RPC transport may serialize dict/list params as JSON strings.
    Pydantic v2 rejects these — this helper coerces them back.

    Returns:
        Parsed value if coercion succeeded, original value otherwise.
    """
    if not isinstance(value, str):
        return value
    try:
        parsed = json.loads(value)
        if isinstance(parsed, expected_type):
            return parsed
    except (json.JSONDecodeError, TypeError):
        pass
    return value


# ── Literal enums ────────────────────────────────────────────────────────────

TaskType = Literal[
    "DAP", "HTP", "Family", "Cactus", "Tree", "Garden", "BenderGestalt2", "ReyOsterrieth",
    "Aile", "Kaktus", "Agac", "Bahce", "Bender", "Rey", "Luscher", "FreeDrawing",
]
Language = Literal["tr", "en", "ru", "tk", "uz"]
UserRole = Literal["parent", "teacher"]
ChildGender = Literal["male", "female"]
TaskCategory = Literal["free_drawing", "instrument"]
ThinkingLevel = Literal["minimal", "low", "medium", "high"]
ModelPreset = Literal["best", "stable", "budget"]

UncertaintyLevel = Literal["low", "mid", "high"]
InsightStrength = Literal["weak", "moderate", "strong"]
OrdinalLevel = Literal["low", "moderate", "high"]
GuidanceUrgency = Literal["monitor", "soon", "promptly"]
RiskFlagType = Literal[
    "self_harm", "harm_others", "sexual_inappropriate",
    "violence", "severe_distress", "trend_regression",
]
RecommendedAction = Literal["consider_consulting_a_specialist"]

# ACEs framework + pediatric psychology taxonomy used by traumaAssessment.
ConcernType = Literal[
    "war", "violence", "disaster", "loss", "loneliness", "fear", "abuse",
    "family_separation", "death", "neglect", "bullying", "domestic_violence_witness",
    "parental_addiction", "parental_mental_illness", "medical_trauma", "anxiety",
    "depression", "low_self_esteem", "anger", "school_stress", "social_rejection",
    "displacement", "poverty", "cyberbullying", "other",
]

SUPPORTED_LANGUAGES: tuple[str, ...] = ("tr", "en", "ru", "tk", "uz")
DEFAULT_LANGUAGE = "tr"

# Turkish instrument codes share the lens of their English counterpart.
TASK_TYPE_ALIASES: dict[str, str] = {
    "Aile": "Family",
    "Kaktus": "Cactus",
    "Agac": "Tree",
    "Bahce": "Garden",
    "Bender": "BenderGestalt2",
    "Rey": "ReyOsterrieth",
}


def canonical_task_type(task_type: str) -> str:
    """Return the instrument code whose interpretive lens applies to *task_type*."""
    return TASK_TYPE_ALIASES.get(task_type, task_type)


def task_category(task_type: str) -> TaskCategory:
    """Free drawing vs. standardized instrument."""
    return "free_drawing" if task_type == "FreeDrawing" else "instrument"


# ── Annotated aliases ────────────────────────────────────────────────────────

ChildAge = Annotated[int, Field(ge=0, le=18, description="Child's age in years (0-18)")]
CulturalContext = Annotated[str, Field(
    max_length=500,
    description="Free-text cultural/family background the interpretation should respect",
)]
