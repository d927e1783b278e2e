"""OpenRouter provider adapter (OpenAI-style over HTTP).

Summary:
- One POST to ``<base>/chat/completions`` via the pooled ``httpx`` client.
- Bearer auth plus the ``HTTP-Referer`` / ``X-Title`` attribution headers
  OpenRouter uses to identify the calling app.
- Text only: attachments are logged and ignored.

Errors:
- Status mapping, body detail extraction and credential scrubbing come from
  ``BaseHttpChatAdapter``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..base.adapter_parts import BaseHttpChatAdapter
from ..base.models import ChatRequest
from ..base.utils.images import EncodedImage
from ..config import get_provider_config
from ..config.defaults import (
    OPENROUTER_DEFAULT_BASE_URL,
    OPENROUTER_DEFAULT_MODEL,
    OPENROUTER_DEFAULT_REFERER,
    OPENROUTER_DEFAULT_TITLE,
)
from .helpers import OpenRouterCommonMixin


class OpenRouterProvider(OpenRouterCommonMixin, BaseHttpChatAdapter):
    """OpenRouter LLM provider implementation.

    Parameters:
        base_url: API base URL; if not provided, resolved from provider config
            (defaults to ``"https://openrouter.ai/api/v1"``).
        referer: ``HTTP-Referer`` header value; config key ``referer``.
        title: ``X-Title`` header value; config key ``title``.

    Side effects:
        - Reads provider-level configuration via ``get_provider_config("openrouter")``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        referer: Optional[str] = None,
        title: Optional[str] = None,
    ) -> None:
        cfg = get_provider_config("openrouter")
        super().__init__(
            base_url=base_url or cfg.get("base_url") or OPENROUTER_DEFAULT_BASE_URL,
            display_name="OpenRouter",
            default_model=OPENROUTER_DEFAULT_MODEL,
            logger_name="multichat.openrouter",
        )
        self._referer = referer or cfg.get("referer") or OPENROUTER_DEFAULT_REFERER
        self._title = title or cfg.get("title") or OPENROUTER_DEFAULT_TITLE

    @property
    def provider_name(self) -> str:
        """Return the canonical provider slug used in logs and config lookups."""
        return "openrouter"

    def _path(self, model: str) -> str:
        return "/chat/completions"

    def _payload(self, request: ChatRequest, model: str, images: Sequence[EncodedImage]) -> Dict[str, Any]:
        return self._build_payload(model, request)

    def _headers(self, request: ChatRequest) -> Dict[str, str]:
        return self._build_headers(request.credential)

    def _extract_text(self, body: Any) -> Optional[str]:
        """Return ``choices[0].message.content`` or ``None``."""
        if not isinstance(body, dict):
            return None
        choice = self._first(body.get("choices"))
        message = choice.get("message") if isinstance(choice, dict) else None
        return message.get("content") if isinstance(message, dict) else None


__all__ = ["OpenRouterProvider"]
