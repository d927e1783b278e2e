"""
User-facing messages for normalized errors.

The UI renders ``ProviderError.message`` verbatim, so every adapter builds its
messages here to keep wording consistent across providers.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode

INVALID_PROVIDER_MESSAGE = "Please select a valid AI provider in settings"
INVALID_MODEL_MESSAGE = "Please select an AI model in settings"
EMPTY_MESSAGE_MESSAGE = "Please enter a message or upload an image for vision models"


def missing_credential_message(display_name: str) -> str:
    """Return the message for a request without the required API key."""
    return f"{display_name} API key is required"


def missing_model_message(display_name: str) -> str:
    """Return the message for a provider that has no default model."""
    article = "an" if display_name[:1].upper() in "AEIOU" else "a"
    return f"Please select {article} {display_name} model"


def malformed_response_message(display_name: str) -> str:
    return f"Invalid response from {display_name}"


def error_message_for(code: ErrorCode, display_name: str, detail: Optional[str] = None) -> str:
    """Build the message for an adapter-boundary failure.

    Authentication and rate-limit failures get fixed guidance text; other
    failures keep the provider-supplied ``detail`` when there is one.
    """
    if code is ErrorCode.AUTHENTICATION_FAILED:
        return f"Invalid {display_name} API key. Please check your API key in settings."
    if code is ErrorCode.RATE_LIMITED:
        return f"{display_name} API rate limit exceeded. Please wait a moment and try again."
    if code is ErrorCode.MALFORMED_RESPONSE:
        return malformed_response_message(display_name)
    if code is ErrorCode.CONNECTION_REFUSED:
        return f"Could not connect to {display_name}. Please make sure it is running."
    return detail or f"Failed to get response from {display_name}"


__all__ = [
    "INVALID_PROVIDER_MESSAGE",
    "INVALID_MODEL_MESSAGE",
    "EMPTY_MESSAGE_MESSAGE",
    "missing_credential_message",
    "missing_model_message",
    "malformed_response_message",
    "error_message_for",
]
