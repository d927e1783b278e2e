"""
ChatRequest DTO for provider-agnostic chat invocations.

Adapters map this normalized request shape to specific wire formats. The
request carries the provider and model selection, the user turn (text plus
optional image attachments), an optional system prompt, sampling parameters
and the caller-owned credential.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .attachment import Attachment


@dataclass(frozen=True)
class ChatRequest:
    """Normalized chat request sent to the dispatcher and provider adapters.

    Attributes:
        provider_id: Provider identifier (``"google"``, ``"openai"``, ...).
        model_id: Provider-specific model name. ``None`` selects the provider
            default; a blank string is rejected by the dispatcher.
        text: User message body.
        attachments: Ordered image attachments (only used by vision models).
        system_prompt: Optional system instruction, sent when non-empty.
        temperature: Sampling temperature in ``[0, 1]``; ``None`` means default.
        max_tokens: Completion token limit; ``None`` means default.
        credential: API key for the provider. Never part of ``repr``.

    Methods:
        to_dict: Return a JSON-serializable dictionary for diagnostics
            (credential and attachment bytes omitted).
    """

    provider_id: str
    model_id: Optional[str] = None
    text: str = ""
    attachments: Tuple[Attachment, ...] = ()
    system_prompt: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    credential: Optional[str] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        # Accept any iterable of attachments but store an immutable tuple.
        if not isinstance(self.attachments, tuple):
            object.__setattr__(self, "attachments", tuple(self.attachments))

    @property
    def has_system_prompt(self) -> bool:
        return bool(self.system_prompt and self.system_prompt.strip())

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary without secrets or raw bytes."""
        return {
            "provider_id": self.provider_id,
            "model_id": self.model_id,
            "text": self.text,
            "attachments": [
                {"media_type": a.media_type, "size": a.size} for a in self.attachments
            ],
            "system_prompt": self.system_prompt,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "has_credential": bool(self.credential),
        }


__all__ = [
    "ChatRequest",
]
