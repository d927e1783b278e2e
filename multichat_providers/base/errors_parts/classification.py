"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements HTTP status extraction, status-to-code mapping, provider error body
parsing and message-based heuristics as a fallback for SDKs that surface
failures without a usable status code.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


def _extract_status(exc: Any) -> Optional[int]:
    """Attempt to extract an HTTP status code from a provider exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code`` (openai SDK, httpx responses)
    - ``exc.status``
    - ``exc.code`` (google-genai ``APIError``)
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status", "code"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and not isinstance(val, bool) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    401: ErrorCode.AUTHENTICATION_FAILED,
    403: ErrorCode.AUTHENTICATION_FAILED,
    429: ErrorCode.RATE_LIMITED,
}

_INVALID_KEY_PHRASES = ("api key not valid", "invalid api key", "api_key_invalid")


def _is_invalid_key_message(msg: str) -> bool:
    return any(phrase in msg for phrase in _INVALID_KEY_PHRASES)


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:
    """Phrase heuristic mapping for exceptions without a status code."""
    if "api key" in msg or "api_key" in msg or "unauthorized" in msg:
        return ErrorCode.AUTHENTICATION_FAILED
    if "rate limit" in msg or "rate_limit" in msg:
        return ErrorCode.RATE_LIMITED
    return None


def classify_status(status: Optional[int]) -> ErrorCode:
    """Map an HTTP status code to an :class:`ErrorCode`.

    Anything that is not an authentication or rate-limit status is a
    ``PROVIDER_ERROR``.
    """
    if status is None:
        return ErrorCode.PROVIDER_ERROR
    return _HTTP_STATUS_MAP.get(status, ErrorCode.PROVIDER_ERROR)


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. HTTP status mapping. A 400 saying the API key is invalid is an
           authentication failure (Google reports bad keys this way).
        3. Message heuristics, only when no status is available.
        4. ``PROVIDER_ERROR`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    msg = str(exc).lower()
    status = _extract_status(exc)
    if status is not None:
        if status == 400 and _is_invalid_key_message(msg):
            return ErrorCode.AUTHENTICATION_FAILED
        return classify_status(status)
    code = _heuristic_from_message(msg)
    return code if code is not None else ErrorCode.PROVIDER_ERROR


def extract_error_detail(body: Any) -> Optional[str]:
    """Return the provider-supplied error message from a decoded error body.

    Recognized shapes::

        {"error": {"message": "..."}}   # OpenAI-compatible APIs
        {"error": "..."}                # Hugging Face, Ollama
        {"message": "..."}
        {"detail": "..."}

    Returns ``None`` when no non-empty string can be found.
    """
    if isinstance(body, str):
        return body.strip() or None
    if not isinstance(body, dict):
        return None
    err = body.get("error")
    if isinstance(err, dict):
        msg = err.get("message")
        if isinstance(msg, str) and msg.strip():
            return msg.strip()
    elif isinstance(err, str) and err.strip():
        return err.strip()
    for key in ("message", "detail"):
        val = body.get(key)
        if isinstance(val, str) and val.strip():
            return val.strip()
    return None


def scrub_secret(text: str, secret: Optional[str]) -> str:
    """Remove every occurrence of ``secret`` from ``text``.

    Provider error bodies occasionally echo the submitted key; this keeps
    credentials out of messages that reach logs and the UI.
    """
    if not secret or not text:
        return text
    return text.replace(secret, "[redacted]")


__all__ = [
    "classify_exception",
    "classify_status",
    "extract_error_detail",
    "scrub_secret",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
