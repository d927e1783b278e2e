"""Unit tests for error classification and user-facing messages."""
from __future__ import annotations

import types

from multichat_providers.base.errors import (
    ErrorCode,
    ProviderError,
    classify_exception,
    classify_status,
    error_message_for,
    extract_error_detail,
    missing_credential_message,
    missing_model_message,
    scrub_secret,
)


class _StatusError(Exception):
    def __init__(self, status_code: int, message: str = "boom") -> None:
        super().__init__(message)
        self.status_code = status_code


def test_classify_status_mapping():
    assert classify_status(401) is ErrorCode.AUTHENTICATION_FAILED  # nosec B101
    assert classify_status(403) is ErrorCode.AUTHENTICATION_FAILED  # nosec B101
    assert classify_status(429) is ErrorCode.RATE_LIMITED  # nosec B101
    assert classify_status(500) is ErrorCode.PROVIDER_ERROR  # nosec B101
    assert classify_status(None) is ErrorCode.PROVIDER_ERROR  # nosec B101


def test_classify_exception_prefers_status():
    assert classify_exception(_StatusError(401)) is ErrorCode.AUTHENTICATION_FAILED  # nosec B101
    assert classify_exception(_StatusError(429)) is ErrorCode.RATE_LIMITED  # nosec B101
    assert classify_exception(_StatusError(400, "bad request")) is ErrorCode.PROVIDER_ERROR  # nosec B101


def test_classify_exception_response_status_and_heuristics():
    exc = Exception("nope")
    exc.response = types.SimpleNamespace(status_code=429)  # type: ignore[attr-defined]
    assert classify_exception(exc) is ErrorCode.RATE_LIMITED  # nosec B101
    assert classify_exception(Exception("API key not valid")) is ErrorCode.AUTHENTICATION_FAILED  # nosec B101
    assert classify_exception(Exception("Rate limit reached")) is ErrorCode.RATE_LIMITED  # nosec B101
    assert classify_exception(Exception("other")) is ErrorCode.PROVIDER_ERROR  # nosec B101


def test_classify_exception_passthrough():
    err = ProviderError(code=ErrorCode.MALFORMED_RESPONSE, message="x", provider="openai")
    assert classify_exception(err) is ErrorCode.MALFORMED_RESPONSE  # nosec B101


def test_extract_error_detail_shapes():
    assert extract_error_detail({"error": {"message": "quota"}}) == "quota"  # nosec B101
    assert extract_error_detail({"error": "model 'x' not found"}) == "model 'x' not found"  # nosec B101
    assert extract_error_detail({"detail": "d"}) == "d"  # nosec B101
    assert extract_error_detail({"error": {}}) is None  # nosec B101
    assert extract_error_detail(None) is None  # nosec B101


def test_scrub_secret():
    assert scrub_secret("bad key sk-123", "sk-123") == "bad key [redacted]"  # nosec B101
    assert scrub_secret("text", None) == "text"  # nosec B101


def test_messages():
    assert missing_credential_message("OpenAI") == "OpenAI API key is required"  # nosec B101
    assert missing_model_message("Ollama") == "Please select an Ollama model"  # nosec B101
    assert (  # nosec B101
        error_message_for(ErrorCode.AUTHENTICATION_FAILED, "Google")
        == "Invalid Google API key. Please check your API key in settings."
    )
    assert error_message_for(ErrorCode.RATE_LIMITED, "OpenAI").startswith("OpenAI API rate limit exceeded")  # nosec B101
    assert error_message_for(ErrorCode.PROVIDER_ERROR, "DeepSeek") == "Failed to get response from DeepSeek"  # nosec B101
    assert error_message_for(ErrorCode.PROVIDER_ERROR, "DeepSeek", "overloaded") == "overloaded"  # nosec B101


def test_provider_error_to_dict_and_validation_kinds():
    err = ProviderError(code=ErrorCode.EMPTY_MESSAGE, message="m", provider="openai")
    assert err.to_dict() == {"kind": "empty_message", "message": "m"}  # nosec B101
    assert err.kind is ErrorCode.EMPTY_MESSAGE  # nosec B101
    assert ErrorCode.MISSING_MODEL.is_validation  # nosec B101
    assert not ErrorCode.CONNECTION_REFUSED.is_validation  # nosec B101


def test_definite_status_is_not_overridden_by_wording():
    exc = _StatusError(400, "Unable to generate: prompt exceeds the context length limit")
    assert classify_exception(exc) is ErrorCode.PROVIDER_ERROR  # nosec B101
    assert classify_exception(_StatusError(500, "moderate load, retry limit hit")) is ErrorCode.PROVIDER_ERROR  # nosec B101
    assert classify_exception(_StatusError(404, "no api_key scope for model")) is ErrorCode.PROVIDER_ERROR  # nosec B101


def test_bad_request_naming_invalid_key_is_authentication_failure():
    exc = _StatusError(400, "API key not valid. Please pass a valid API key.")
    assert classify_exception(exc) is ErrorCode.AUTHENTICATION_FAILED  # nosec B101


def test_wording_without_status_needs_rate_limit_phrase():
    assert classify_exception(Exception("could not generate within limit")) is ErrorCode.PROVIDER_ERROR  # nosec B101
    assert classify_exception(Exception("rate_limit_exceeded")) is ErrorCode.RATE_LIMITED  # nosec B101
