"""
ChatResponse DTO representing normalized provider responses.

Only the assistant's reply text is modeled. Token counts, finish reasons and
other provider envelope fields are dropped by the adapters.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ChatResponse:
    """Provider-agnostic response from a chat invocation.

    Attributes:
        text: The assistant's full reply (markdown, rendered by the UI).
    """

    text: str

    def to_dict(self) -> Dict[str, str]:
        return {"text": self.text}


__all__ = [
    "ChatResponse",
]
