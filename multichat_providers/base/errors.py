"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``multichat_providers.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.classification import (
    classify_exception,
    classify_status,
    extract_error_detail,
    scrub_secret,
)
from .errors_parts.messages import (
    EMPTY_MESSAGE_MESSAGE,
    INVALID_MODEL_MESSAGE,
    INVALID_PROVIDER_MESSAGE,
    error_message_for,
    missing_credential_message,
    missing_model_message,
)

__all__ = [
    "ErrorCode",
    "ProviderError",
    "classify_exception",
    "classify_status",
    "extract_error_detail",
    "scrub_secret",
    "error_message_for",
    "missing_credential_message",
    "missing_model_message",
    "EMPTY_MESSAGE_MESSAGE",
    "INVALID_MODEL_MESSAGE",
    "INVALID_PROVIDER_MESSAGE",
]
