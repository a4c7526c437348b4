"""Request schema — validates and normalizes a caller's analysis request.

``parse_request()`` is the single entry point used by the tool surface.
Structural checks are pydantic validators; any failure is re-raised as the
domain :class:`~drawing_analysis_mcp.errors.ValidationError` naming the
offending wire field.
"""

from __future__ import annotations

import base64
import binascii
import re
from collections.abc import Mapping
from typing import Any

import pydantic
from pydantic import Field, field_validator

from ..errors import ValidationError
from ..types import (
    DEFAULT_LANGUAGE,
    ChildGender,
    Language,
    TaskCategory,
    TaskType,
    UserRole,
    canonical_task_type,
    task_category,
)
from ._base import CamelModel

# ≈3.75 MB of decoded image data.
MAX_IMAGE_BASE64_CHARS = 5_000_000
MAX_IMAGES = 10
MAX_FEATURE_KEY_LENGTH = 100
MAX_CULTURAL_CONTEXT_LENGTH = 500

_DATA_URL_RE = re.compile(r"^data:(?P<mime>image/[\w.+-]+);base64,", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")

_LEGACY_GENDERS: dict[str, str | None] = {
    "male": "male",
    "female": "female",
    "erkek": "male",
    "kız": "female",
    "kiz": "female",
    "diğer": None,
    "diger": None,
    "other": None,
}


def sniff_mime(data: bytes) -> str:
    """Guess an image MIME type from magic bytes, defaulting to JPEG."""
    if data.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if data.startswith(b"GIF87a") or data.startswith(b"GIF89a"):
        return "image/gif"
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"


def _split_data_url(content: str) -> tuple[str | None, str]:
    """Return (declared mime or None, bare base64 payload).

    Line breaks and other whitespace inside the payload (MIME-wrapped
    base64) are removed.
    """
    match = _DATA_URL_RE.match(content)
    if match:
        return match.group("mime").lower(), _WHITESPACE_RE.sub("", content[match.end():])
    return None, _WHITESPACE_RE.sub("", content)


def _check_image_payload(content: str) -> str:
    """Enforce the size budget and base64 well-formedness of one image."""
    _, payload = _split_data_url(content.strip())
    if not payload:
        raise ValueError("image content is empty")
    if len(payload) > MAX_IMAGE_BASE64_CHARS:
        raise ValueError(
            f"image too large ({len(payload)} base64 chars, max {MAX_IMAGE_BASE64_CHARS})"
        )
    try:
        base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("image content is not valid base64") from exc
    return content.strip()


def decode_image(content: str) -> tuple[bytes, str]:
    """Decode an already-validated image payload into (bytes, mime_type)."""
    declared, payload = _split_data_url(content)
    data = base64.b64decode(payload)
    return data, declared or sniff_mime(data)


class ImageInput(CamelModel):
    """One drawing in a multi-image request (e.g. house / tree / person)."""

    id: str = Field(min_length=1, max_length=100)
    label: str = Field(default="", max_length=200)
    content: str

    @field_validator("content")
    @classmethod
    def validate_content(cls, value: str) -> str:
        return _check_image_payload(value)

    def decode(self) -> tuple[bytes, str]:
        return decode_image(self.content)


class AnalysisRequest(CamelModel):
    """Caller input for one analysis."""

    task_type: TaskType
    child_age: int | None = Field(default=None, ge=0, le=18)
    child_gender: ChildGender | None = None
    language: Language = DEFAULT_LANGUAGE
    user_role: UserRole = "parent"
    cultural_context: str | None = Field(default=None, max_length=MAX_CULTURAL_CONTEXT_LENGTH)
    images: list[ImageInput] | None = Field(default=None, max_length=MAX_IMAGES)
    image_base64: str | None = None
    features_json: dict[str, Any] | None = None

    @field_validator("child_gender", mode="before")
    @classmethod
    def upgrade_legacy_gender(cls, value: Any) -> Any:
        if isinstance(value, str):
            key = value.strip().lower()
            if key in _LEGACY_GENDERS:
                return _LEGACY_GENDERS[key]
        return value

    @field_validator("language", "user_role", mode="before")
    @classmethod
    def default_when_null(cls, value: Any, info: pydantic.ValidationInfo) -> Any:
        if value is None:
            return DEFAULT_LANGUAGE if info.field_name == "language" else "parent"
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("image_base64")
    @classmethod
    def validate_legacy_image(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return _check_image_payload(value)

    @field_validator("features_json")
    @classmethod
    def validate_feature_keys(cls, value: dict[str, Any] | None) -> dict[str, Any] | None:
        if value is None:
            return None
        for key in value:
            if len(key) > MAX_FEATURE_KEY_LENGTH:
                raise ValueError(
                    f"feature key '{key[:20]}…' exceeds {MAX_FEATURE_KEY_LENGTH} characters"
                )
        return value

    @property
    def category(self) -> TaskCategory:
        return task_category(self.task_type)

    @property
    def instrument(self) -> str:
        """Canonical instrument code (Turkish aliases resolved)."""
        return canonical_task_type(self.task_type)

    def effective_images(self, default_label: str) -> list[ImageInput]:
        """Explicit image list, else the legacy single image, else nothing."""
        if self.images:
            return list(self.images)
        if self.image_base64:
            return [ImageInput(id="image_1", label=default_label, content=self.image_base64)]
        return []


def _wire_path(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "request"


def parse_request(payload: Mapping[str, Any] | AnalysisRequest) -> AnalysisRequest:
    """Validate raw caller input into a normalized AnalysisRequest.

    Raises:
        ValidationError: naming the first offending field (wire spelling).
    """
    if isinstance(payload, AnalysisRequest):
        return payload
    if not isinstance(payload, Mapping):
        raise ValidationError("request", "expected an object")
    try:
        return AnalysisRequest.model_validate(dict(payload))
    except pydantic.ValidationError as exc:
        first = exc.errors()[0]
        raise ValidationError(_wire_path(first["loc"]), first["msg"]) from exc
