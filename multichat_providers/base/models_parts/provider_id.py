"""
Provider identifiers recognized by the dispatcher.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ProviderId(str, Enum):
    """Canonical provider ids. Values are what callers send as ``provider_id``."""

    GOOGLE = "google"
    OPENAI = "openai"
    HUGGINGFACE = "huggingface"
    DEEPSEEK = "deepseek"
    OLLAMA = "ollama"
    OPENROUTER = "openrouter"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ProviderId"]:
        """Return the matching member for ``value`` (case-insensitive) or None."""
        name = (value or "").lower().strip()
        for member in cls:
            if member.value == name:
                return member
        return None

    @property
    def requires_credential(self) -> bool:
        """Every provider except the local Ollama daemon needs an API key."""
        return self is not ProviderId.OLLAMA


__all__ = ["ProviderId"]
