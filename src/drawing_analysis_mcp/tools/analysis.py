"""Drawing analysis tools — 2 tools on a FastMCP sub-server."""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated, Any

from fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import Field

from ..activity import build_recorder
from ..client import GeminiClient, GeminiInvoker
from ..config import get_config
from ..errors import ValidationError, make_tool_error
from ..models.request import MAX_FEATURE_KEY_LENGTH, MAX_IMAGE_BASE64_CHARS, MAX_IMAGES
from ..pipeline import DrawingAnalysisPipeline
from ..tracing import request_attributes, tag_current_span, trace
from ..types import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    TASK_TYPE_ALIASES,
    ChildAge,
    CulturalContext,
    TaskType,
    UserRole,
    coerce_json_param,
    task_category,
)

logger = logging.getLogger(__name__)

analysis_server = FastMCP("analysis")

# Expected image count and typical age range per instrument.
TASK_CATALOG: dict[str, dict[str, Any]] = {
    "DAP": {"imageCount": 1, "ageRange": [5, 12]},
    "HTP": {"imageCount": 3, "ageRange": [5, 12]},
    "Family": {"imageCount": 1, "ageRange": [4, 14]},
    "Cactus": {"imageCount": 1, "ageRange": [5, 12]},
    "Tree": {"imageCount": 1, "ageRange": [5, 14]},
    "Garden": {"imageCount": 1, "ageRange": [5, 12]},
    "BenderGestalt2": {"imageCount": 1, "ageRange": [5, 11]},
    "ReyOsterrieth": {"imageCount": 2, "ageRange": [4, 14]},
    "Luscher": {"imageCount": 0, "ageRange": [5, 18]},
    "FreeDrawing": {"imageCount": 1, "ageRange": [2, 18]},
}


def _build_pipeline() -> DrawingAnalysisPipeline:
    """Wire a pipeline from the live config and the shared client pool."""
    return DrawingAnalysisPipeline(
        GeminiInvoker(GeminiClient.get()),
        notifier=build_recorder(),
    )


def _request_payload(**fields: Any) -> dict[str, Any]:
    """Drop unset tool arguments so request defaults apply."""
    return {k: v for k, v in fields.items() if v is not None}


@analysis_server.tool(annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=True))
@trace(name="drawing_analyze", span_type="TOOL")
async def drawing_analyze(
    task_type: Annotated[TaskType, Field(
        description="Instrument code (DAP, HTP, Family, Tree, ...) or 'FreeDrawing'",
    )],
    images: Annotated[list[dict] | None, Field(
        description="Ordered images: [{id, label, content}] with base64 or data-URL content",
    )] = None,
    image_base64: Annotated[str | None, Field(
        description="Legacy single image (base64); ignored when images is given",
    )] = None,
    child_age: ChildAge | None = None,
    child_gender: Annotated[str | None, Field(description="'male' or 'female'")] = None,
    language: Annotated[str | None, Field(
        description="Response language: tr, en, ru, tk or uz (default tr)",
    )] = None,
    user_role: UserRole | None = None,
    cultural_context: CulturalContext | None = None,
    features_json: Annotated[dict | None, Field(
        description="Precomputed drawing signals, e.g. {'colorCount': 5}",
    )] = None,
    caller_id: Annotated[str | None, Field(
        description="Authenticated user id; enables the activity notification",
    )] = None,
) -> dict:
    """Analyze a child's drawing and return a localized observation report.

    Supports free drawings and standardized projective instruments, with
    zero, one or several images. Malformed model output is replaced by a
    low-confidence fallback report rather than an error.

    Args:
        task_type: Instrument code or "FreeDrawing".
        images: Labeled images in the order they should be interpreted.
        image_base64: Legacy single-image field.
        child_age: Age in years (0-18).
        child_gender: "male" or "female".
        language: Output language code.
        user_role: "parent" or "teacher".
        cultural_context: Family / cultural background to respect.
        features_json: Precomputed signal map.
        caller_id: User identity forwarded to the activity recorder.

    Returns:
        Dict matching the AnalysisResult schema (camelCase keys), or a
        ToolError dict on failure.
    """
    images = coerce_json_param(images, list)
    features_json = coerce_json_param(features_json, dict)
    lang = language if language in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE

    payload = _request_payload(
        taskType=task_type,
        childAge=child_age,
        childGender=child_gender,
        language=language,
        userRole=user_role,
        culturalContext=cultural_context,
        images=images,
        imageBase64=image_base64,
        featuresJson=features_json,
    )
    image_count = len(images) if isinstance(images, list) else int(bool(image_base64))
    tag_current_span(request_attributes(task_type, lang, image_count))

    try:
        pipeline = _build_pipeline()
        result = await asyncio.wait_for(
            pipeline.analyze(payload, caller_id=caller_id),
            timeout=get_config().analysis_timeout_seconds,
        )
    except ValidationError as exc:
        logger.info("Rejected drawing_analyze request: %s", exc)
        return make_tool_error(exc, language=lang)
    except TimeoutError as exc:
        logger.warning("drawing_analyze timed out for %s", task_type)
        return make_tool_error(exc, language=lang)
    except Exception as exc:
        logger.error("drawing_analyze failed for %s: %s", task_type, exc, exc_info=True)
        return make_tool_error(exc, language=lang)
    return result.to_wire()


@analysis_server.tool(annotations=ToolAnnotations(readOnlyHint=True, idempotentHint=True))
@trace(name="drawing_catalog", span_type="TOOL")
async def drawing_catalog() -> dict:
    """List supported task types, languages and request limits.

    Returns:
        Dict with taskTypes (category, expected image count, age range),
        aliases, languages and limits.
    """
    task_types = {
        code: {"category": task_category(code), **entry} for code, entry in TASK_CATALOG.items()
    }
    return {
        "taskTypes": task_types,
        "aliases": dict(TASK_TYPE_ALIASES),
        "languages": list(SUPPORTED_LANGUAGES),
        "defaultLanguage": DEFAULT_LANGUAGE,
        "limits": {
            "maxImages": MAX_IMAGES,
            "maxImageBase64Chars": MAX_IMAGE_BASE64_CHARS,
            "maxFeatureKeyLength": MAX_FEATURE_KEY_LENGTH,
        },
    }
