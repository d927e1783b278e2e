"""BaseHttpChatAdapter: adapters that speak JSON over ``httpx``.

Purpose:
- Shared POST/parse/error mapping for providers without an SDK in the
  stack (openrouter, huggingface, ollama).
- Subclasses describe the wire format: path, payload, headers and where the
  reply text lives in the decoded body.

Transport:
- Uses the pooled ``httpx.Client`` from :func:`get_httpx_client`; the pooled
  client holds no credentials, auth headers are built per request.

Failure semantics:
- ``httpx.TransportError`` -> ``_transport_error`` (``PROVIDER_ERROR`` by
  default; ollama maps it to ``CONNECTION_REFUSED``).
- HTTP status >= 400 -> ``classify_status`` with the provider detail from the
  error body, scrubbed of the credential.
- Undecodable JSON -> ``MALFORMED_RESPONSE``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import httpx

from ..errors import ErrorCode, ProviderError, classify_status, extract_error_detail
from ..http import get_httpx_client
from ..models import ChatRequest
from ..utils.images import EncodedImage
from .chat_adapter import BaseChatAdapter


class BaseHttpChatAdapter(BaseChatAdapter):
    """Base class for JSON-over-HTTP chat adapters.

    Subclasses must implement ``provider_name``, ``_path``, ``_payload`` and
    ``_extract_text``; they may override ``_headers`` and ``_transport_error``.
    """

    def __init__(
        self,
        *,
        base_url: str,
        display_name: str,
        default_model: Optional[str],
        logger_name: str,
    ) -> None:
        super().__init__(display_name=display_name, default_model=default_model, logger_name=logger_name)
        self._base_url = base_url.rstrip("/")

    # ----- wire format hooks -----
    def _path(self, model: str) -> str:  # pragma: no cover - abstract
        raise NotImplementedError

    def _payload(self, request: ChatRequest, model: str, images: Sequence[EncodedImage]) -> Dict[str, Any]:  # pragma: no cover - abstract
        raise NotImplementedError

    def _extract_text(self, body: Any) -> Optional[str]:  # pragma: no cover - abstract
        raise NotImplementedError

    def _headers(self, request: ChatRequest) -> Dict[str, str]:
        """Bearer auth header for the request's credential."""
        headers = {"Content-Type": "application/json"}
        if request.credential:
            headers["Authorization"] = f"Bearer {request.credential}"
        return headers

    def _transport_error(self, exc: httpx.TransportError, model: str) -> ProviderError:
        return self._error(ErrorCode.PROVIDER_ERROR, model, raw=exc)

    # ----- call -----
    def _invoke(self, request: ChatRequest, model: str, images: Sequence[EncodedImage]) -> Optional[str]:
        client = get_httpx_client(self._base_url, purpose=f"{self.provider_name}.chat")
        try:
            resp = client.post(
                self._path(model),
                json=self._payload(request, model, images),
                headers=self._headers(request),
            )
        except httpx.TransportError as exc:
            raise self._transport_error(exc, model) from exc
        if resp.status_code >= 400:
            raise self._status_error(resp, request, model)
        try:
            body = resp.json()
        except ValueError as exc:
            raise self._error(ErrorCode.MALFORMED_RESPONSE, model, raw=exc) from exc
        return self._extract_text(body)

    def _status_error(self, resp: httpx.Response, request: ChatRequest, model: str) -> ProviderError:
        """Map a non-2xx response to a ``ProviderError``."""
        try:
            body: Any = resp.json()
        except ValueError:
            body = resp.text
        detail = self._scrubbed(extract_error_detail(body), request)
        return self._error(classify_status(resp.status_code), model, detail=detail)


__all__ = ["BaseHttpChatAdapter"]
