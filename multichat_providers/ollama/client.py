"""Ollama provider adapter.

Purpose:
    Implements chat against the local Ollama HTTP API (default
    ``http://localhost:11434``) with one non-streaming ``POST /api/chat``.

External dependencies:
    - HTTP client only (``httpx``). No SDK or API key is required since
      Ollama is a local daemon.

Failure semantics:
    - A blank model raises ``MISSING_MODEL`` before any network call; Ollama
      has no default model.
    - A refused or timed-out connection raises ``CONNECTION_REFUSED``
      ("Could not connect to Ollama. Please make sure it is running.").
    - Daemon errors such as ``{"error": "model 'x' not found"}`` keep the
      daemon's detail as a ``PROVIDER_ERROR``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import httpx

from ..base.adapter_parts import BaseHttpChatAdapter
from ..base.errors import ErrorCode, ProviderError, missing_model_message
from ..base.models import ChatRequest, ChatResponse
from ..base.utils.images import EncodedImage
from .helpers import build_payload, resolve_host


class OllamaProvider(BaseHttpChatAdapter):
    def __init__(self, host: Optional[str] = None) -> None:
        """Initialize the Ollama provider.

        Parameters
        ----------
        host:
            Explicit base URL for the Ollama daemon. When omitted, the value
            comes from the layered configuration stack (config file,
            ``OLLAMA_HOST``) and finally ``http://localhost:11434``.
        """
        super().__init__(
            base_url=resolve_host(host),
            display_name="Ollama",
            default_model=None,
            logger_name="multichat.ollama",
        )

    @property
    def provider_name(self) -> str:
        """Return the stable provider identifier string."""
        return "ollama"

    def send(self, request: ChatRequest) -> ChatResponse:
        """Send one chat turn to the local daemon.

        Raises:
            ProviderError: ``MISSING_MODEL`` without a model (no request is
                made), ``CONNECTION_REFUSED`` when the daemon is unreachable.
        """
        if not (request.model_id or "").strip():
            raise ProviderError(
                code=ErrorCode.MISSING_MODEL,
                message=missing_model_message(self.display_name),
                provider=self.provider_name,
            )
        return super().send(request)

    def _path(self, model: str) -> str:
        return "/api/chat"

    def _payload(self, request: ChatRequest, model: str, images: Sequence[EncodedImage]) -> Dict[str, Any]:
        return build_payload(model, request)

    def _headers(self, request: ChatRequest) -> Dict[str, str]:
        return {"Content-Type": "application/json"}

    def _transport_error(self, exc: httpx.TransportError, model: str) -> ProviderError:
        if isinstance(exc, (httpx.ConnectError, httpx.ConnectTimeout)):
            return self._error(ErrorCode.CONNECTION_REFUSED, model, raw=exc)
        return super()._transport_error(exc, model)

    def _extract_text(self, body: Any) -> Optional[str]:
        """Return ``message.content`` or ``None``."""
        message = body.get("message") if isinstance(body, dict) else None
        return message.get("content") if isinstance(message, dict) else None


__all__ = ["OllamaProvider"]
