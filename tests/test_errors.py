"""Tests for structured error categorization and retryability flags."""

from __future__ import annotations

import httpx
import pytest

from drawing_analysis_mcp.errors import (
    ANALYSIS_FAILED_MESSAGES,
    ErrorCategory,
    ModelInvocationError,
    ValidationError,
    categorize_error,
    make_tool_error,
)


class TestCategorizeError:
    def test_request_field_error(self):
        cat, hint = categorize_error(ValidationError("childAge", "must be between 0 and 18"))
        assert cat == ErrorCategory.REQUEST_INVALID
        assert "childAge" in hint

    def test_oversized_image(self):
        cat, _ = categorize_error(ValidationError("images.0.content", "image payload too large"))
        assert cat == ErrorCategory.IMAGE_TOO_LARGE

    @pytest.mark.parametrize(("message", "expected"), [
        ("403 PERMISSION_DENIED", ErrorCategory.API_PERMISSION_DENIED),
        ("429 RESOURCE_EXHAUSTED", ErrorCategory.API_QUOTA_EXCEEDED),
        ("400 INVALID_ARGUMENT", ErrorCategory.API_INVALID_ARGUMENT),
        ("connection reset", ErrorCategory.NETWORK_ERROR),
        ("500 INTERNAL", ErrorCategory.MODEL_INVOCATION_FAILED),
    ])
    def test_model_failures(self, message, expected):
        assert categorize_error(ModelInvocationError(message))[0] == expected

    def test_cause_is_inspected(self):
        try:
            try:
                raise httpx.ConnectError("connection refused")
            except httpx.ConnectError as exc:
                raise ModelInvocationError("upstream failure") from exc
        except ModelInvocationError as err:
            assert categorize_error(err)[0] == ErrorCategory.NETWORK_ERROR

    def test_builtin_timeout_is_analysis_timeout(self):
        assert categorize_error(TimeoutError())[0] == ErrorCategory.ANALYSIS_TIMEOUT

    def test_unknown_error_hint_hides_details(self):
        cat, hint = categorize_error(RuntimeError("something odd"))
        assert cat == ErrorCategory.UNKNOWN
        assert "something odd" not in hint


class TestMakeToolError:
    def test_validation_error_keeps_message_and_field(self):
        result = make_tool_error(ValidationError("language", "unsupported language 'fr'"))
        assert result["field"] == "language"
        assert "fr" in result["error"]
        assert result["retryable"] is False

    @pytest.mark.parametrize("language", ["tr", "en", "ru", "tk", "uz"])
    def test_model_failure_message_localized(self, language):
        result = make_tool_error(ModelInvocationError("stack trace with secrets"), language=language)
        assert result["error"] == ANALYSIS_FAILED_MESSAGES[language]
        assert result["retryable"] is True

    def test_unknown_language_uses_turkish(self):
        result = make_tool_error(TimeoutError(), language="de")
        assert result["error"] == ANALYSIS_FAILED_MESSAGES["tr"]
        assert result["category"] == "ANALYSIS_TIMEOUT"

    def test_quota_sets_retry_after(self):
        result = make_tool_error(ModelInvocationError("429 quota exceeded"))
        assert result["category"] == "API_QUOTA_EXCEEDED"
        assert result["retry_after_seconds"] == 60

    def test_permission_error_not_retryable(self):
        result = make_tool_error(PermissionError("mutations disabled"))
        assert result["category"] == "PERMISSION_DENIED"
        assert result["retryable"] is False
        assert result["retry_after_seconds"] is None

    @pytest.mark.parametrize("error", [
        KeyError("internal secret detail"),
        RuntimeError("db password=internal secret detail"),
        ModelInvocationError("429 quota: internal secret detail"),
    ])
    def test_internal_details_never_returned(self, error):
        result = make_tool_error(error, language="en")
        assert "internal secret detail" not in result["error"]
        assert "internal secret detail" not in result["hint"]
        assert result["error"] == ANALYSIS_FAILED_MESSAGES["en"]
