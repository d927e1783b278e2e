"""Initialization dataclass for OpenAI-style providers.

Encapsulates common constructor parameters used by ``BaseOpenAIStyleProvider``.
No credential lives here: the API key travels on each ``ChatRequest``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class _ProviderInit:
    """Initialization bundle for ``BaseOpenAIStyleProvider``.

    Attributes:
        base_url: Provider base URL for the OpenAI-style API.
        default_model: Model used when a request doesn't specify one.
        display_name: Name shown in user-facing error messages.
        logger_name: Structured logger name (e.g., ``multichat.deepseek``).
    """

    base_url: str
    default_model: Optional[str]
    display_name: str
    logger_name: str


__all__ = ["_ProviderInit"]
