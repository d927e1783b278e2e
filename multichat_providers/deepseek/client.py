"""DeepseekProvider adapter using the OpenAI-compatible Chat Completions API.

Built on ``BaseOpenAIStyleProvider``; only the base URL, default model and
names differ from the OpenAI adapter. DeepSeek models are text only, so
attachments are logged and ignored.
"""

from __future__ import annotations

from typing import Optional

from openai import OpenAI

from ..base.http import get_httpx_client
from ..base.openai_style_parts import BaseOpenAIStyleProvider, _ProviderInit
from ..base.timeouts import get_timeout_config
from ..config import get_provider_config
from ..config.defaults import (
    DEEPSEEK_DEFAULT_BASE_URL,
    DEEPSEEK_DEFAULT_MODEL,
)


class DeepseekProvider(BaseOpenAIStyleProvider):
    """Deepseek provider built on the OpenAI-style base class."""

    def __init__(self, base_url: Optional[str] = None) -> None:
        """Initialize the DeepseekProvider.

        Args:
            base_url: The base URL for the Deepseek API. Falls back to the
                ``deepseek`` provider config, then the public endpoint.
        """
        cfg = get_provider_config("deepseek")
        init = _ProviderInit(
            base_url=base_url or cfg.get("base_url") or DEEPSEEK_DEFAULT_BASE_URL,
            default_model=DEEPSEEK_DEFAULT_MODEL,
            display_name="DeepSeek",
            logger_name="multichat.deepseek",
        )
        super().__init__(init)

    @property
    def provider_name(self) -> str:
        return "deepseek"

    def _make_client(self, api_key: str) -> OpenAI:
        """Create an OpenAI SDK client pointed at the Deepseek base URL."""
        return OpenAI(
            api_key=api_key,
            base_url=self._base_url,
            max_retries=0,
            timeout=get_timeout_config().http_timeout_seconds,
            http_client=get_httpx_client(None, purpose="deepseek.sdk"),
        )
