"""Structured output extraction from raw model text.

Tolerates surrounding prose, markdown code fences, stray whitespace and
common near-JSON slips (trailing commas, unquoted keys, ``undefined``,
single-quoted strings). Never raises: a failed extraction is returned as
data so the pipeline can substitute the fallback result.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

_FENCE_RE = re.compile(r"```(?:json|JSON)?[ \t]*\r?\n?(.*?)```", re.DOTALL)
_OBJECT_SPAN_RE = re.compile(r"\{.*\}", re.DOTALL)
_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")
_UNQUOTED_KEY_RE = re.compile(r"([{,]\s*)([A-Za-z_][A-Za-z0-9_]*)\s*:")
_UNDEFINED_RE = re.compile(r":\s*undefined\b")
_decoder = json.JSONDecoder()


@dataclass
class ExtractionResult:
    """Outcome of one extraction attempt."""

    success: bool
    data: dict[str, Any] | None = None
    error: str = ""
    raw_text: str = ""


def _candidates(text: str) -> Iterator[str]:
    """Yield candidate JSON texts in priority order."""
    yield text
    for match in _FENCE_RE.finditer(text):
        yield match.group(1).strip()


def _try_object(candidate: str) -> dict[str, Any] | None:
    try:
        value = json.loads(candidate)
    except (json.JSONDecodeError, ValueError):
        return None
    return value if isinstance(value, dict) else None


def _scan_objects(text: str) -> dict[str, Any] | None:
    """Decode from every ``{`` position; first complete object wins."""
    start = text.find("{")
    while start != -1:
        try:
            value, _ = _decoder.raw_decode(text, start)
        except (json.JSONDecodeError, ValueError):
            value = None
        if isinstance(value, dict):
            return value
        start = text.find("{", start + 1)
    return None


def repair_json(text: str) -> str | None:
    """Patch the outermost ``{...}`` span of *text* into strict JSON.

    Returns None when *text* holds no brace-delimited span.
    """
    match = _OBJECT_SPAN_RE.search(text)
    if match is None:
        return None
    fixed = _TRAILING_COMMA_RE.sub(r"\1", match.group(0))
    if '"' not in fixed and "'" in fixed:
        fixed = fixed.replace("'", '"')
    fixed = _UNQUOTED_KEY_RE.sub(r'\1"\2":', fixed)
    return _UNDEFINED_RE.sub(": null", fixed)


def extract_json(text: str | None) -> ExtractionResult:
    """Locate and parse the first JSON object in *text*.

    Strict parsing is tried first (whole text, fenced blocks, embedded
    objects); :func:`repair_json` is the last resort.
    """
    raw = text or ""
    stripped = raw.strip()
    if not stripped:
        return ExtractionResult(success=False, error="empty response", raw_text=raw)

    for candidate in _candidates(stripped):
        data = _try_object(candidate)
        if data is not None:
            return ExtractionResult(success=True, data=data, raw_text=raw)

    data = _scan_objects(stripped)
    if data is not None:
        return ExtractionResult(success=True, data=data, raw_text=raw)

    repaired = repair_json(stripped)
    data = _try_object(repaired) if repaired is not None else None
    if data is not None:
        return ExtractionResult(success=True, data=data, raw_text=raw)
    return ExtractionResult(success=False, error="no JSON object found", raw_text=raw)
