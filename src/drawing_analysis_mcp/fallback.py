"""Output validation, legacy-shape upgrade, and the fallback result.

Everything the pipeline returns goes through :func:`validate_result`,
including the fallback itself, so callers only ever see the v3 shape.
"""

from __future__ import annotations

import logging
from typing import Any

import pydantic

from .errors import OutputSchemaViolation
from .models.analysis import AnalysisMeta, AnalysisResult, HomeTip, Insight
from .models.request import AnalysisRequest
from .prompts import notices

logger = logging.getLogger(__name__)

FALLBACK_CONFIDENCE = 0.3
MAX_FALLBACK_SUMMARY_CHARS = 4000
PARSE_ERROR_EVIDENCE = "parse_error"

_UNCERTAINTY_ALIASES = {"medium": "mid", "moderate": "mid", "middle": "mid"}


def _as_str_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, list):
        return [str(v) for v in value if v is not None and str(v).strip()]
    return [str(value)]


def _first(data: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _is_legacy(data: dict[str, Any]) -> bool:
    return "meta" not in data or isinstance(data.get("insights"), str)


def upgrade_legacy_output(data: dict[str, Any], *, language: str = "tr") -> dict[str, Any]:
    """Upgrade flat output shapes from earlier prompt generations to v3.

    Legacy responses carry top-level ``title``/``summary`` (or ``insights``
    as a single string), plus optional ``emotions``, ``themes``,
    ``strengths``, ``conversation_starters`` and ``activity_suggestions``
    lists. Already-canonical data is returned with only light normalization
    (uncertainty aliases, fixed risk-flag action).
    """
    out = dict(data)

    if _is_legacy(out):
        title = _first(out, "title") or ""
        summary = out.get("insights") if isinstance(out.get("insights"), str) else _first(out, "summary")
        evidence = (
            _as_str_list(out.get("themes"))
            + _as_str_list(out.get("emotions"))
            + _as_str_list(out.get("strengths"))
        )
        if isinstance(out.get("insights"), str) or summary:
            out["insights"] = [{
                "title": title or notices.FALLBACK_INSIGHT_TITLE.get(language, "—"),
                "summary": summary or title,
                "evidence": evidence,
                "strength": "moderate",
            }]
        tips = _first(out, "homeTips", "home_tips")
        if tips is None:
            out["homeTips"] = [
                {"title": s, "steps": [], "why": ""}
                for s in _as_str_list(_first(out, "activity_suggestions", "activitySuggestions"))
            ]
        starters = _as_str_list(_first(out, "conversation_starters", "conversationStarters"))
        if starters and _first(out, "conversationGuide", "conversation_guide") is None:
            out["conversationGuide"] = {"openingQuestions": starters}
        meta = dict(out.get("meta") or {})
        meta.setdefault("confidence", 0.5)
        meta.setdefault("uncertaintyLevel", "mid")
        out["meta"] = meta
        for key in (
            "title", "summary", "emotions", "themes", "strengths",
            "activity_suggestions", "activitySuggestions",
            "conversation_starters", "conversationStarters",
        ):
            out.pop(key, None)

    meta = out.get("meta")
    if isinstance(meta, dict):
        level = meta.get("uncertaintyLevel", meta.get("uncertainty_level"))
        if isinstance(level, str) and level.lower() in _UNCERTAINTY_ALIASES:
            meta = {k: v for k, v in meta.items() if k != "uncertainty_level"}
            meta["uncertaintyLevel"] = _UNCERTAINTY_ALIASES[level.lower()]
            out["meta"] = meta

    flags = _first(out, "riskFlags", "risk_flags")
    if isinstance(flags, list):
        out.pop("risk_flags", None)
        out["riskFlags"] = [
            {**flag, "action": "consider_consulting_a_specialist"} if isinstance(flag, dict) else flag
            for flag in flags
        ]
    return out


def check_consistency(result: AnalysisResult, *, require_conversation_guide: bool) -> list[str]:
    """Contract checks beyond field types.

    Returns:
        List of issue strings (empty = consistent).
    """
    issues: list[str] = []
    if require_conversation_guide:
        guide = result.conversation_guide
        if guide is None:
            issues.append("conversationGuide is required for free drawings")
        elif not guide.opening_questions:
            issues.append("conversationGuide.openingQuestions is empty")
    return issues


def _normalize(result: AnalysisResult) -> AnalysisResult:
    trauma = result.trauma_assessment
    if trauma is None:
        return result
    if not trauma.has_traumatic_content and not trauma.content_types:
        return result.model_copy(update={"trauma_assessment": None})
    if trauma.primary_concern and trauma.primary_concern not in trauma.content_types:
        fixed = trauma.model_copy(
            update={"content_types": [*trauma.content_types, trauma.primary_concern]},
        )
        return result.model_copy(update={"trauma_assessment": fixed})
    return result


def _describe(exc: pydantic.ValidationError) -> str:
    parts = []
    for err in exc.errors()[:5]:
        loc = ".".join(str(p) for p in err["loc"]) or "result"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def validate_result(
    data: dict[str, Any], *, require_conversation_guide: bool = False
) -> AnalysisResult:
    """Validate extracted model output against the v3 result contract.

    Raises:
        OutputSchemaViolation: If a field is missing/invalid or a
            consistency check fails.
    """
    try:
        result = AnalysisResult.model_validate(data)
    except pydantic.ValidationError as exc:
        raise OutputSchemaViolation(_describe(exc)) from exc
    issues = check_consistency(result, require_conversation_guide=require_conversation_guide)
    if issues:
        raise OutputSchemaViolation("; ".join(issues))
    return _normalize(result)


def build_fallback(request: AnalysisRequest, raw_text: str | None, *, reason: str = "") -> AnalysisResult:
    """Low-confidence, always-valid result for unusable model output.

    The single insight carries the raw model text (or a localized generic
    note when it is blank) with evidence exactly ``["parse_error"]``.
    """
    language = request.language
    summary = (raw_text or "").strip()[:MAX_FALLBACK_SUMMARY_CHARS]
    if not summary:
        summary = notices.FALLBACK_GENERIC_NOTE[language]
    if reason:
        logger.debug("Building fallback result (%s)", reason)

    free_drawing = request.category == "free_drawing"
    result = AnalysisResult(
        meta=AnalysisMeta(
            test_type=request.task_type,
            age=request.child_age,
            language=language,
            confidence=FALLBACK_CONFIDENCE,
            uncertainty_level="high",
            data_quality_notes=[notices.FALLBACK_QUALITY_NOTE[language]],
        ),
        insights=[Insight(
            title=notices.FALLBACK_INSIGHT_TITLE[language],
            summary=summary,
            evidence=[PARSE_ERROR_EVIDENCE],
            strength="weak",
        )],
        home_tips=[HomeTip.model_validate(notices.RETRY_TIP[language])],
        risk_flags=[],
        conversation_guide=notices.FALLBACK_CONVERSATION_GUIDE[language] if free_drawing else None,
        disclaimer=notices.DISCLAIMERS[language],
    )
    return validate_result(
        result.model_dump(by_alias=True),
        require_conversation_guide=free_drawing,
    )
