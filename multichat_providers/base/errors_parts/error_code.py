"""
Normalized provider error codes (taxonomy).

Defines the `ErrorCode` enumeration shared by the dispatcher, the provider
adapters and the HTTP service. Values are lowercase snake_case and are
considered a stable public contract for logging and for the JSON error body
returned to the UI.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    # Request validation (raised before any adapter runs)
    INVALID_PROVIDER = "invalid_provider"
    INVALID_MODEL = "invalid_model"
    MISSING_CREDENTIAL = "missing_credential"
    MISSING_MODEL = "missing_model"
    EMPTY_MESSAGE = "empty_message"

    # Adapter boundary
    MALFORMED_RESPONSE = "malformed_response"
    AUTHENTICATION_FAILED = "authentication_failed"
    RATE_LIMITED = "rate_limited"
    CONNECTION_REFUSED = "connection_refused"
    PROVIDER_ERROR = "provider_error"

    @property
    def is_validation(self) -> bool:
        """Return True for codes produced by request validation."""
        return self in _VALIDATION_CODES


_VALIDATION_CODES = frozenset(
    {
        ErrorCode.INVALID_PROVIDER,
        ErrorCode.INVALID_MODEL,
        ErrorCode.MISSING_CREDENTIAL,
        ErrorCode.MISSING_MODEL,
        ErrorCode.EMPTY_MESSAGE,
    }
)


__all__ = ["ErrorCode"]
