"""Analysis result models — the output contract for drawing_analyze.

AnalysisResult is the richest (v3) schema and the only one used
internally. Flat shapes produced by earlier prompt generations are
upgraded by ``upgrade_legacy_output()`` before validation.
"""

from __future__ import annotations

from pydantic import Field, field_validator

from ..types import (
    ConcernType,
    GuidanceUrgency,
    InsightStrength,
    Language,
    OrdinalLevel,
    RecommendedAction,
    RiskFlagType,
    UncertaintyLevel,
)
from ._base import CamelModel

SCHEMA_VERSION = "v3"


class AnalysisMeta(CamelModel):
    """Echoed request context plus the model's self-reported confidence."""

    test_type: str
    age: int | None = None
    language: Language
    confidence: float = Field(ge=0.0, le=1.0)
    uncertainty_level: UncertaintyLevel
    data_quality_notes: list[str] = Field(default_factory=list)


class Insight(CamelModel):
    """One titled, evidence-backed observation."""

    title: str = Field(min_length=1)
    summary: str = Field(min_length=1)
    evidence: list[str] = Field(default_factory=list)
    strength: InsightStrength = "moderate"


class HomeTip(CamelModel):
    title: str = Field(min_length=1)
    steps: list[str] = Field(default_factory=list)
    why: str = ""


class RiskFlag(CamelModel):
    """A typed safety concern. Never a diagnosis; the action is fixed."""

    type: RiskFlagType
    summary: str = ""
    action: RecommendedAction = "consider_consulting_a_specialist"


class TraumaAssessment(CamelModel):
    """Present only when concerning content was detected in the drawing."""

    has_traumatic_content: bool
    content_types: list[ConcernType] = Field(default_factory=list)
    primary_concern: ConcernType | None = None
    therapeutic_approach: str = ""
    severity: OrdinalLevel = "low"
    emotional_intensity: OrdinalLevel = "low"
    professional_recommendation: str = ""
    immediate_actions: list[str] = Field(default_factory=list)


class ConversationGuide(CamelModel):
    """Parent-facing prompts for talking with the child about the drawing."""

    opening_questions: list[str] = Field(default_factory=list)
    follow_up_questions: list[str] = Field(default_factory=list)
    avoid_topics: list[str] = Field(default_factory=list)
    supportive_responses: list[str] = Field(default_factory=list)


class ProfessionalGuidance(CamelModel):
    when_to_seek: list[str] = Field(default_factory=list)
    professional_types: list[str] = Field(default_factory=list)
    urgency: GuidanceUrgency = "monitor"


class AnalysisResult(CamelModel):
    """Output schema for drawing_analyze (also the fallback shape)."""

    meta: AnalysisMeta
    insights: list[Insight] = Field(min_length=1)
    home_tips: list[HomeTip] = Field(default_factory=list)
    risk_flags: list[RiskFlag] = Field(default_factory=list)
    trauma_assessment: TraumaAssessment | None = None
    conversation_guide: ConversationGuide | None = None
    professional_guidance: ProfessionalGuidance | None = None
    trend_note: str = ""
    disclaimer: str = Field(min_length=1)

    @field_validator("trend_note", mode="before")
    @classmethod
    def null_trend_note(cls, value: object) -> object:
        return "" if value is None else value
