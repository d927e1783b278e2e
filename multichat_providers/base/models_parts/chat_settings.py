"""
ChatSettings: explicit per-call configuration struct.

The calling layer owns persistence of these values (browser storage, a user
profile, ...). The core receives them by value for each send and builds a
``ChatRequest`` from them together with the caller's credential mapping.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from ...config.defaults import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from .attachment import Attachment
from .chat_request import ChatRequest


@dataclass(frozen=True)
class ChatSettings:
    """User-selected provider, model and generation settings.

    Attributes:
        provider_id: Selected provider id (empty until the user picks one).
        model_id: Selected model id (empty until the user picks one).
        temperature: Sampling temperature.
        max_tokens: Completion token limit.
        system_prompt: Optional system instruction.
    """

    provider_id: str = ""
    model_id: str = ""
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    system_prompt: str = ""

    def to_request(
        self,
        text: str,
        credentials: Optional[Mapping[str, str]] = None,
        attachments: Iterable[Attachment] = (),
    ) -> ChatRequest:
        """Build a ``ChatRequest`` for one send.

        Parameters:
            text: The user's message.
            credentials: Caller-owned mapping of provider id to API key. Only
                the entry for the selected provider is copied into the request.
            attachments: Images selected for this message.
        """
        key = (credentials or {}).get((self.provider_id or "").lower().strip())
        return ChatRequest(
            provider_id=self.provider_id,
            model_id=self.model_id,
            text=text,
            attachments=tuple(attachments),
            system_prompt=self.system_prompt or None,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            credential=key or None,
        )


__all__ = ["ChatSettings"]
