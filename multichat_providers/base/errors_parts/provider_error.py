"""
Structured provider error exception type.

Wraps validation failures and provider-specific exceptions with a normalized
`ErrorCode` so callers can branch on the kind and show the message verbatim.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable message, safe to show to the user. Never
            contains the request credential.
        provider: Provider id where the error originated (e.g. ``"openai"``).
        model: Optional model name associated with the failure.
        raw: Optional original exception for diagnostics (hidden from repr).
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    raw: Optional[Exception] = field(default=None, repr=False, compare=False)

    @property
    def kind(self) -> ErrorCode:
        """Alias of ``code`` matching the normalized error contract."""
        return self.code

    def to_dict(self) -> Dict[str, Any]:
        """Return the ``{kind, message}`` shape rendered by the UI."""
        return {"kind": self.code.value, "message": self.message}

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


__all__ = ["ProviderError"]
