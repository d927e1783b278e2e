"""OpenAI provider adapter built on BaseOpenAIStyleProvider.

Sends one Chat Completions call through the ``openai`` SDK. ``*vision*``
models (``gpt-4-vision-preview``) receive image attachments as ``image_url``
parts carrying ``data:`` URIs after the text part; other models ignore them.

The SDK client is built per call from the request's credential, with
``max_retries=0`` and the pooled ``httpx`` client as transport.
"""

from __future__ import annotations

from typing import Optional

from openai import OpenAI

from ..base.http import get_httpx_client
from ..base.openai_style_parts import BaseOpenAIStyleProvider, _ProviderInit
from ..base.timeouts import get_timeout_config
from ..config import get_provider_config
from ..config.defaults import OPENAI_DEFAULT_BASE_URL, OPENAI_DEFAULT_MODEL

__all__ = ["OpenAIProvider"]


class OpenAIProvider(BaseOpenAIStyleProvider):
    """OpenAI adapter using the shared OpenAI-style base provider."""

    def __init__(self, base_url: Optional[str] = None) -> None:
        cfg = get_provider_config("openai")
        init = _ProviderInit(
            base_url=base_url or cfg.get("base_url") or OPENAI_DEFAULT_BASE_URL,
            default_model=OPENAI_DEFAULT_MODEL,
            display_name="OpenAI",
            logger_name="multichat.openai",
        )
        super().__init__(init)

    @property
    def provider_name(self) -> str:
        """Return the canonical provider name."""
        return "openai"

    def _make_client(self, api_key: str) -> OpenAI:
        return OpenAI(
            api_key=api_key,
            base_url=self._base_url,
            max_retries=0,
            timeout=get_timeout_config().http_timeout_seconds,
            http_client=get_httpx_client(None, purpose="openai.sdk"),
        )
