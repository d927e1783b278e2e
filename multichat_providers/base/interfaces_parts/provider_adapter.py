"""ProviderAdapter Protocol (single-class module).

Defines the chat interface contract every provider adapter implements.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ..models import ChatRequest, ChatResponse


@runtime_checkable
class ProviderAdapter(Protocol):
    """Single-shot chat adapter for one remote provider.

    Implementations map ``ChatRequest`` fields to their wire format, perform
    exactly one network call and normalize the reply to ``ChatResponse``.
    Adapters are stateless: the credential arrives with each request and is
    never stored on the instance.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"openai"`` or ``"google"``."""
        ...

    @property
    def display_name(self) -> str:
        """Human-readable name used in user-facing error messages."""
        ...

    def default_model(self) -> Optional[str]:
        """Return the model used when the caller selects none (``None`` if required)."""
        ...

    def send(self, request: ChatRequest) -> ChatResponse:
        """Execute a single chat request.

        Failure handling: raise ``ProviderError`` for every transport,
        HTTP or payload failure. Never return partial text.
        """
        ...
