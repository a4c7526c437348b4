"""Drawing-analysis pipeline orchestrator.

One call runs: validate request → compose → invoke → extract →
validate output (or fallback) → schedule activity notification.
The pipeline holds no per-call state; a single instance serves
concurrent requests.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from .activity import ANALYSIS_ACTIVITY, ActivityRecorder, schedule_activity
from .compose import ComposedPrompt, compose_prompt
from .errors import OutputSchemaViolation
from .extract import extract_json
from .fallback import PARSE_ERROR_EVIDENCE, build_fallback, upgrade_legacy_output, validate_result
from .models.analysis import AnalysisResult
from .models.request import AnalysisRequest, parse_request
from .profiles import PipelineProfile, resolve_profile
from .prompts import get_templates, notices
from .types import TaskCategory

logger = logging.getLogger(__name__)

# Raw model text logged on fallback is truncated to this many chars.
_LOG_RAW_CHARS = 2000


class ModelInvoker(Protocol):
    """Anything that turns a composed prompt into raw completion text."""

    async def invoke(self, prompt: ComposedPrompt) -> str: ...


class DrawingAnalysisPipeline:
    """Turns an analysis request into a validated :class:`AnalysisResult`.

    Args:
        invoker: Model invoker (e.g. ``GeminiInvoker``); injected so tests
            can substitute a fake.
        notifier: Optional downstream activity recorder.
        profiles: Fixed per-category profiles. When omitted, profiles are
            resolved from the live config on every call so runtime
            ``infra_configure`` changes apply immediately.
    """

    def __init__(
        self,
        invoker: ModelInvoker,
        *,
        notifier: ActivityRecorder | None = None,
        profiles: Mapping[TaskCategory, PipelineProfile] | None = None,
    ) -> None:
        self._invoker = invoker
        self._notifier = notifier
        self._profiles = dict(profiles) if profiles else None

    def profile_for(self, category: TaskCategory) -> PipelineProfile:
        if self._profiles and category in self._profiles:
            return self._profiles[category]
        return resolve_profile(category)

    async def analyze(
        self,
        request: AnalysisRequest | Mapping[str, Any],
        *,
        caller_id: str | None = None,
    ) -> AnalysisResult:
        """Run one analysis.

        Raises:
            ValidationError: If the request is malformed (no model call made).
            ModelInvocationError: If the model call fails (no fallback).
        """
        req = parse_request(request)
        profile = self.profile_for(req.category)
        prompt = compose_prompt(req, profile)
        logger.info(
            "Analyzing %s (lang=%s, role=%s, images=%d, model=%s)",
            req.task_type, req.language, req.user_role, prompt.image_count, profile.model,
        )

        raw = await self._invoker.invoke(prompt)
        result = self._finalize(req, raw)

        if caller_id and self._notifier is not None:
            schedule_activity(
                self._notifier,
                caller_id,
                activity_type=ANALYSIS_ACTIVITY,
                metadata={
                    "taskType": req.task_type,
                    "language": req.language,
                    "fallback": result.insights[0].evidence == [PARSE_ERROR_EVIDENCE],
                },
            )
        return result

    def _finalize(self, req: AnalysisRequest, raw: str) -> AnalysisResult:
        """Extract and validate *raw*, substituting the fallback on failure."""
        extraction = extract_json(raw)
        if not extraction.success:
            logger.warning(
                "Model output extraction failed (%s); using fallback. Raw: %.*s",
                extraction.error, _LOG_RAW_CHARS, raw,
            )
            return build_fallback(req, raw, reason=extraction.error)

        data = self._echo_request(upgrade_legacy_output(extraction.data, language=req.language), req)
        free_drawing = req.category == "free_drawing"
        if free_drawing:
            data = self._ensure_conversation_guide(data, req)
        try:
            return validate_result(data, require_conversation_guide=free_drawing)
        except OutputSchemaViolation as exc:
            logger.warning(
                "Model output violates result schema (%s); using fallback. Raw: %.*s",
                exc, _LOG_RAW_CHARS, raw,
            )
            return build_fallback(req, raw, reason="schema violation")

    @staticmethod
    def _ensure_conversation_guide(data: dict[str, Any], req: AnalysisRequest) -> dict[str, Any]:
        """Supply the localized default guide when a free-drawing reply omits it."""
        guide = data.get("conversationGuide", data.get("conversation_guide"))
        if isinstance(guide, dict) and guide.get("openingQuestions", guide.get("opening_questions")):
            return data
        logger.info("Free-drawing output lacks opening questions; using the default guide (lang=%s)", req.language)
        default = notices.FALLBACK_CONVERSATION_GUIDE[req.language]
        if isinstance(guide, dict):
            kept = {k: v for k, v in guide.items() if k != "opening_questions"}
            guide = {**kept, "openingQuestions": default["openingQuestions"]}
        else:
            guide = default
        out = {k: v for k, v in data.items() if k != "conversation_guide"}
        out["conversationGuide"] = guide
        return out

    @staticmethod
    def _echo_request(data: dict[str, Any], req: AnalysisRequest) -> dict[str, Any]:
        """Overwrite echoed meta fields and the disclaimer from the request."""
        meta = data.get("meta")
        meta = dict(meta) if isinstance(meta, dict) else {}
        for snake in ("test_type", "age", "language"):
            meta.pop(snake, None)
        meta.update(testType=req.task_type, age=req.child_age, language=req.language)
        return {
            **data,
            "meta": meta,
            "disclaimer": get_templates(req.category, req.language).disclaimer,
        }
