"""Structured error handling — pipeline exceptions, classification, and tool error model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class AnalysisError(Exception):
    """Base class for every error raised by the analysis pipeline."""


class ValidationError(AnalysisError):
    """The caller's request is malformed. Raised before any model call.

    Attributes:
        field: Wire name of the offending request field (e.g. ``childAge``).
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class ModelInvocationError(AnalysisError):
    """Transport or upstream failure while calling the generative model."""


class OutputSchemaViolation(AnalysisError):
    """The model's output parsed but does not satisfy the result contract."""


class ErrorCategory(str, Enum):
    """Categories of errors for diagnostics."""

    REQUEST_INVALID = "REQUEST_INVALID"
    IMAGE_TOO_LARGE = "IMAGE_TOO_LARGE"
    MODEL_INVOCATION_FAILED = "MODEL_INVOCATION_FAILED"
    API_PERMISSION_DENIED = "API_PERMISSION_DENIED"
    API_QUOTA_EXCEEDED = "API_QUOTA_EXCEEDED"
    API_INVALID_ARGUMENT = "API_INVALID_ARGUMENT"
    ANALYSIS_TIMEOUT = "ANALYSIS_TIMEOUT"
    NETWORK_ERROR = "NETWORK_ERROR"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    UNKNOWN = "UNKNOWN"


# User-visible message for any fatal model failure; details stay in the logs.
ANALYSIS_FAILED_MESSAGES: dict[str, str] = {
    "tr": "Analiz şu anda tamamlanamadı. Lütfen biraz sonra tekrar deneyin.",
    "en": "The analysis could not be completed right now. Please try again in a moment.",
    "ru": "Сейчас не удалось выполнить анализ. Пожалуйста, попробуйте ещё раз чуть позже.",
    "tk": "Derňew häzir tamamlanyp bilmedi. Biraz wagtdan soň gaýtadan synanyşyň.",
    "uz": "Tahlilni hozir yakunlab bo'lmadi. Iltimos, birozdan so'ng qayta urinib ko'ring.",
}


class ToolError(BaseModel):
    """Structured error returned from any tool."""

    error: str
    category: str
    hint: str
    field: str | None = None
    retryable: bool = False
    retry_after_seconds: int | None = None


def categorize_error(error: Exception) -> tuple[ErrorCategory, str]:
    """Map an exception to an ErrorCategory + human-readable hint."""
    if isinstance(error, ValidationError):
        if "too large" in error.message.lower():
            return (
                ErrorCategory.IMAGE_TOO_LARGE,
                "Image payload exceeds the size budget — downscale or compress the drawing",
            )
        return (
            ErrorCategory.REQUEST_INVALID,
            f"Fix the '{error.field}' field and resend the request",
        )
    if isinstance(error, TimeoutError):
        return (
            ErrorCategory.ANALYSIS_TIMEOUT,
            "Analysis took too long and was abandoned — try again",
        )
    if isinstance(error, PermissionError):
        return (
            ErrorCategory.PERMISSION_DENIED,
            "Operation not allowed by server policy",
        )

    s = str(error).lower()
    if isinstance(error, ModelInvocationError) and error.__cause__ is not None:
        s = f"{s} {error.__cause__}".lower()

    if "403" in s or "permission" in s:
        return (
            ErrorCategory.API_PERMISSION_DENIED,
            "API key lacks permission for the selected model",
        )
    if "429" in s or "quota" in s or "resource_exhausted" in s:
        return (
            ErrorCategory.API_QUOTA_EXCEEDED,
            "Rate limit hit — wait and retry, or switch models with infra_configure(preset='budget')",
        )
    if "400" in s:
        return (
            ErrorCategory.API_INVALID_ARGUMENT,
            "Model rejected the request — check image encoding and size",
        )
    if "timeout" in s or "timed out" in s or "connect" in s:
        return (
            ErrorCategory.NETWORK_ERROR,
            "Request timed out or connection failed — try again or check connectivity",
        )
    if isinstance(error, ModelInvocationError):
        return (
            ErrorCategory.MODEL_INVOCATION_FAILED,
            "The model call failed — try again later",
        )

    return (ErrorCategory.UNKNOWN, "Unexpected server error; details are in the server logs")


# Categories whose exception text is safe and useful to show the caller.
_CALLER_FACING = {
    ErrorCategory.REQUEST_INVALID,
    ErrorCategory.IMAGE_TOO_LARGE,
    ErrorCategory.PERMISSION_DENIED,
}


def make_tool_error(error: Exception, *, language: str = "tr") -> dict:
    """Create a serialisable ToolError dict from an exception.

    Only caller-fixable errors (invalid request, oversized image, policy
    refusal) echo their own message. Everything else surfaces the generic
    localized message; the exception text stays in the server logs.
    """
    cat, hint = categorize_error(error)
    retryable = cat in {
        ErrorCategory.API_QUOTA_EXCEEDED,
        ErrorCategory.NETWORK_ERROR,
        ErrorCategory.ANALYSIS_TIMEOUT,
        ErrorCategory.MODEL_INVOCATION_FAILED,
    }
    if cat in _CALLER_FACING:
        message = str(error)
    else:
        message = ANALYSIS_FAILED_MESSAGES.get(language, ANALYSIS_FAILED_MESSAGES["tr"])
    return ToolError(
        error=message,
        category=cat.value,
        hint=hint,
        field=error.field if isinstance(error, ValidationError) else None,
        retryable=retryable,
        retry_after_seconds=60 if cat == ErrorCategory.API_QUOTA_EXCEEDED else None,
    ).model_dump(mode="json")
