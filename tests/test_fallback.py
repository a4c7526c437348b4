"""Tests for output validation, legacy upgrade and the fallback result."""

from __future__ import annotations

import pytest

from drawing_analysis_mcp.errors import OutputSchemaViolation
from drawing_analysis_mcp.fallback import (
    FALLBACK_CONFIDENCE,
    build_fallback,
    upgrade_legacy_output,
    validate_result,
)
from drawing_analysis_mcp.models.analysis import AnalysisResult
from drawing_analysis_mcp.models.request import parse_request
from drawing_analysis_mcp.prompts import notices
from drawing_analysis_mcp.types import SUPPORTED_LANGUAGES
from tests.conftest import model_output


def _with_echo(data: dict, **meta) -> dict:
    merged = {**data["meta"], "testType": "DAP", "age": 7, "language": "en", **meta}
    return {**data, "meta": merged, "disclaimer": "Not a diagnosis."}


class TestValidateResult:
    def test_valid_output(self):
        result = validate_result(_with_echo(model_output()))
        assert isinstance(result, AnalysisResult)
        assert result.meta.confidence == 0.72
        assert result.risk_flags == []

    def test_missing_insights_is_violation(self):
        with pytest.raises(OutputSchemaViolation):
            validate_result(_with_echo(model_output(insights=[])))

    def test_confidence_out_of_range_is_violation(self):
        with pytest.raises(OutputSchemaViolation, match="confidence"):
            validate_result(_with_echo(model_output(), confidence=1.7))

    def test_unknown_risk_flag_type_is_violation(self):
        data = model_output(riskFlags=[{"type": "bad_vibes", "summary": "?"}])
        with pytest.raises(OutputSchemaViolation):
            validate_result(_with_echo(data))

    def test_unknown_concern_tag_is_violation(self):
        data = model_output(traumaAssessment={"hasTraumaticContent": True, "contentTypes": ["aliens"]})
        with pytest.raises(OutputSchemaViolation):
            validate_result(_with_echo(data))

    def test_free_drawing_requires_conversation_guide(self):
        data = _with_echo(model_output(conversationGuide=None))
        assert validate_result(data).conversation_guide is None
        with pytest.raises(OutputSchemaViolation, match="conversationGuide"):
            validate_result(data, require_conversation_guide=True)

    def test_empty_trauma_block_is_dropped(self):
        data = model_output(traumaAssessment={"hasTraumaticContent": False, "contentTypes": []})
        assert validate_result(_with_echo(data)).trauma_assessment is None

    def test_primary_concern_added_to_content_types(self):
        data = model_output(traumaAssessment={
            "hasTraumaticContent": True,
            "contentTypes": ["fear"],
            "primaryConcern": "loss",
            "severity": "moderate",
        })
        trauma = validate_result(_with_echo(data)).trauma_assessment
        assert trauma.content_types == ["fear", "loss"]

    def test_null_trend_note_becomes_empty(self):
        assert validate_result(_with_echo(model_output(trendNote=None))).trend_note == ""

    def test_wire_dump_uses_camel_case(self):
        wire = validate_result(_with_echo(model_output())).to_wire()
        assert "homeTips" in wire
        assert "uncertaintyLevel" in wire["meta"]


class TestUpgradeLegacyOutput:
    def test_flat_shape_upgraded(self):
        legacy = {
            "title": "Aile Resmi",
            "insights": "Figures are close together and smiling.",
            "emotions": ["happy"],
            "themes": ["belonging"],
            "conversation_starters": ["Who is this?"],
            "activity_suggestions": ["Draw your home together"],
        }
        data = upgrade_legacy_output(legacy, language="en")
        assert data["insights"][0]["title"] == "Aile Resmi"
        assert data["insights"][0]["summary"] == "Figures are close together and smiling."
        assert data["insights"][0]["evidence"] == ["belonging", "happy"]
        assert data["homeTips"] == [{"title": "Draw your home together", "steps": [], "why": ""}]
        assert data["conversationGuide"] == {"openingQuestions": ["Who is this?"]}
        assert "title" not in data

        result = validate_result(_with_echo(data), require_conversation_guide=True)
        assert result.meta.uncertainty_level == "mid"

    def test_summary_without_title_gets_localized_title(self):
        data = upgrade_legacy_output({"summary": "Bir ağaç."}, language="tr")
        assert data["insights"][0]["title"] == notices.FALLBACK_INSIGHT_TITLE["tr"]

    def test_canonical_shape_untouched_except_normalization(self):
        canonical = model_output()
        assert upgrade_legacy_output(canonical) == canonical

    def test_uncertainty_alias_normalized(self):
        data = model_output(meta={"confidence": 0.5, "uncertaintyLevel": "medium"})
        assert upgrade_legacy_output(data)["meta"]["uncertaintyLevel"] == "mid"

    def test_risk_flag_action_forced(self):
        data = model_output(riskFlags=[{"type": "violence", "summary": "x", "action": "call_police"}])
        flags = upgrade_legacy_output(data)["riskFlags"]
        assert flags[0]["action"] == "consider_consulting_a_specialist"

    def test_snake_case_risk_flags_renamed(self):
        data = model_output()
        del data["riskFlags"]
        data["risk_flags"] = [{"type": "self_harm"}]
        out = upgrade_legacy_output(data)
        assert "risk_flags" not in out
        assert out["riskFlags"][0]["type"] == "self_harm"


class TestBuildFallback:
    def test_prose_becomes_summary(self):
        req = parse_request({"taskType": "Family", "childAge": 7, "language": "en"})
        result = build_fallback(req, "This is not valid JSON at all!")
        assert result.meta.uncertainty_level == "high"
        assert result.meta.confidence == FALLBACK_CONFIDENCE
        assert result.meta.test_type == "Family"
        assert result.meta.age == 7
        assert len(result.insights) == 1
        assert result.insights[0].summary == "This is not valid JSON at all!"
        assert result.insights[0].evidence == ["parse_error"]
        assert result.insights[0].strength == "weak"
        assert result.risk_flags == []
        assert len(result.home_tips) == 1
        assert result.home_tips[0].title == notices.RETRY_TIP["en"]["title"]
        assert result.conversation_guide is None

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_blank_raw_text_uses_generic_note(self, raw):
        req = parse_request({"taskType": "DAP", "language": "uz"})
        result = build_fallback(req, raw)
        assert result.insights[0].summary == notices.FALLBACK_GENERIC_NOTE["uz"]

    def test_long_raw_text_truncated(self):
        req = parse_request({"taskType": "DAP"})
        result = build_fallback(req, "x" * 10_000)
        assert len(result.insights[0].summary) == 4000

    def test_free_drawing_fallback_keeps_conversation_guide(self):
        req = parse_request({"taskType": "FreeDrawing", "language": "tk"})
        result = build_fallback(req, "oops")
        assert result.conversation_guide is not None
        assert result.conversation_guide.opening_questions

    @pytest.mark.parametrize("language", list(SUPPORTED_LANGUAGES))
    def test_fallback_is_localized(self, language):
        req = parse_request({"taskType": "Tree", "language": language})
        result = build_fallback(req, "nope")
        assert result.meta.language == language
        assert result.disclaimer == notices.DISCLAIMERS[language]
        AnalysisResult.model_validate(result.to_wire())
