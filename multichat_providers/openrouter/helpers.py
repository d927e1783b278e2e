"""Common helpers for the OpenRouter provider.

Purpose:
    Provide the payload and header builders for OpenRouter's
    OpenAI-compatible ``/chat/completions`` endpoint, keeping the provider
    module focused on configuration.

Notes:
    These helpers assume the consumer is an instance that provides attributes
    ``_referer`` and ``_title`` (the app attribution headers).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..base.models import ChatRequest
from ..base.utils.messages import build_messages


class OpenRouterCommonMixin:
    """Mixin offering payload/header builders for OpenRouter.

    Consumers must define ``_referer`` and ``_title`` attributes.
    """

    _referer: str
    _title: str

    def _build_payload(self, model: str, request: ChatRequest) -> Dict[str, Any]:
        """Assemble the JSON payload for chat/completions.

        Parameters:
            model: Target model identifier (``vendor/model`` form).
            request: Normalized request with generation parameters.

        Returns:
            A mapping suitable for POST body serialization.
        """
        return {
            "model": model,
            "messages": build_messages(request),
            **({"temperature": request.temperature} if request.temperature is not None else {}),
            **({"max_tokens": request.max_tokens} if request.max_tokens is not None else {}),
        }

    def _build_headers(self, api_key: Optional[str]) -> Dict[str, str]:
        """Build HTTP headers: bearer auth plus the attribution pair.

        Returns:
            Mapping of headers; includes ``Authorization`` if a key is present.
        """
        headers: Dict[str, str] = {
            "Content-Type": "application/json",
            "HTTP-Referer": self._referer,
            "X-Title": self._title,
        }
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        return headers


__all__ = ["OpenRouterCommonMixin"]
