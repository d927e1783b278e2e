"""BaseOpenAIStyleProvider implementation.

Purpose:
- Provide a reusable base class for providers implementing an OpenAI-compatible
  Chat Completions interface through the ``openai`` SDK (openai, deepseek).

External dependencies:
- Relies on the SDK client supplied by concrete subclasses via
  ``_make_client``. This module does not perform network I/O directly.

Failure semantics:
- SDK exceptions (``openai.APIStatusError`` and friends) are classified by
  ``BaseChatAdapter._wrap_exception``: 401/403 -> authentication, 429 ->
  rate limit, anything else keeps the provider detail.
- The SDK is built with ``max_retries=0``; one send is one HTTP call.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..adapter_parts import BaseChatAdapter
from ..models import ChatRequest
from ..utils.images import EncodedImage
from .client_protocol import _ChatCompletionsClient
from .provider_init import _ProviderInit
from .style_helpers import build_chat_params, extract_openai_text


class BaseOpenAIStyleProvider(BaseChatAdapter):
    """Reusable base class for OpenAI-compatible providers.

    Subclasses must implement:
    - ``provider_name``: canonical provider identifier.
    - ``_make_client(api_key)``: create and return an SDK client implementing
      :class:`_ChatCompletionsClient` semantics for this one call.
    """

    def __init__(self, init: _ProviderInit) -> None:
        """Initialize a provider with shared configuration.

        Parameters:
            init: Dataclass containing base_url, default model, display name
                and logger name.
        """
        super().__init__(
            display_name=init.display_name,
            default_model=init.default_model,
            logger_name=init.logger_name,
        )
        self._base_url = init.base_url

    # ----- Abstract surface -----
    def _make_client(self, api_key: str) -> _ChatCompletionsClient:  # pragma: no cover - abstract
        """Create and return the underlying SDK client.

        Implementations pass ``api_key`` and ``self._base_url``; the client is
        discarded after the call so the key is not retained.
        """
        raise NotImplementedError

    # ----- Chat -----
    def _invoke(self, request: ChatRequest, model: str, images: Sequence[EncodedImage]) -> Optional[str]:
        client = self._make_client(request.credential or "")
        params = build_chat_params(model, request, images)
        resp = client.chat.completions.create(**params)
        return extract_openai_text(resp)


__all__ = ["BaseOpenAIStyleProvider"]
