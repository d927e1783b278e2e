"""BaseChatAdapter: shared single-shot send orchestration.

Purpose:
- Hold the steps every provider adapter performs around its one network
  call: model resolution, vision attachment gating and encoding, start/end
  logging, response validation and error normalization.
- Concrete adapters implement ``_invoke`` only (plus naming properties).

External dependencies:
- None directly. Subclasses bring their SDK or HTTP client.

Failure semantics:
- ``ProviderError`` raised by ``_invoke`` passes through after a
  ``chat.error`` log event.
- Any other exception is classified with ``classify_exception`` and wrapped;
  the provider detail is scrubbed of the request credential.
- A missing or empty reply text raises ``MALFORMED_RESPONSE``.
"""

from __future__ import annotations

import logging
import time
from typing import Any, List, Optional, Sequence

from ..errors import (
    ErrorCode,
    ProviderError,
    classify_exception,
    error_message_for,
    extract_error_detail,
    scrub_secret,
)
from ..logging import LogContext, get_logger, normalized_log_event
from ..models import ChatRequest, ChatResponse
from ..utils.images import EncodedImage, encode_attachments
from ..utils.messages import is_vision_model


class BaseChatAdapter:
    """Reusable base class for provider adapters.

    Subclasses must implement:
    - ``provider_name``: canonical provider identifier.
    - ``_invoke(request, model, images)``: perform the network call and return
      the reply text (``None`` when the payload has no usable text).
    """

    def __init__(self, *, display_name: str, default_model: Optional[str], logger_name: str) -> None:
        self._display_name = display_name
        self._model = default_model
        self._logger = get_logger(logger_name)

    # ----- Abstract surface -----
    @property
    def provider_name(self) -> str:  # pragma: no cover - abstract
        raise NotImplementedError

    def _invoke(self, request: ChatRequest, model: str, images: Sequence[EncodedImage]) -> Optional[str]:  # pragma: no cover - abstract
        raise NotImplementedError

    # ----- Basic info -----
    @property
    def display_name(self) -> str:
        return self._display_name

    def default_model(self) -> Optional[str]:
        """Return the model used when the request names none."""
        return self._model

    # ----- Send -----
    def send(self, request: ChatRequest) -> ChatResponse:
        """Send one chat turn and return the assistant text.

        Raises:
            ProviderError: transport, HTTP or payload failure.
        """
        model = request.model_id or self._model or ""
        ctx = LogContext(provider=self.provider_name, model=model)
        images = self._prepare_images(request, model, ctx)
        self._log_chat_start(ctx, request, image_count=len(images))
        t0 = time.perf_counter()
        try:
            text = self._invoke(request, model, images)
        except ProviderError as err:
            self._log_chat_error(ctx, err)
            raise
        except Exception as exc:  # noqa: BLE001 - normalized and re-raised
            err = self._wrap_exception(exc, request, model)
            self._log_chat_error(ctx, err)
            raise err from exc
        if not isinstance(text, str) or not text:
            err = self._error(ErrorCode.MALFORMED_RESPONSE, model)
            self._log_chat_error(ctx, err)
            raise err
        latency_ms = (time.perf_counter() - t0) * 1000.0
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            emitted=True,
            latency_ms=round(latency_ms, 2),
            response_chars=len(text),
        )
        return ChatResponse(text=text)

    # ----- helpers -----
    def _supports_vision(self, model: str) -> bool:
        return is_vision_model(self.provider_name, model)

    def _prepare_images(self, request: ChatRequest, model: str, ctx: LogContext) -> List[EncodedImage]:
        """Encode attachments for vision models; log and drop them otherwise."""
        if not request.attachments:
            return []
        if self._supports_vision(model):
            return encode_attachments(request.attachments)
        normalized_log_event(
            self._logger,
            "attachments.ignored",
            ctx,
            phase="prepare",
            level=logging.WARNING,
            count=len(request.attachments),
        )
        return []

    def _log_chat_start(self, ctx: LogContext, request: ChatRequest, *, image_count: int) -> None:
        normalized_log_event(
            self._logger,
            "chat.start",
            ctx,
            phase="start",
            temperature=request.temperature,
            max_tokens=request.max_tokens,
            has_system_prompt=request.has_system_prompt,
            image_count=image_count,
        )

    def _log_chat_error(self, ctx: LogContext, err: ProviderError) -> None:
        normalized_log_event(
            self._logger,
            "chat.error",
            ctx,
            phase="finalize",
            level=logging.WARNING,
            error_code=err.code.value,
        )

    def _error(
        self,
        code: ErrorCode,
        model: Optional[str],
        detail: Optional[str] = None,
        raw: Optional[Exception] = None,
    ) -> ProviderError:
        """Build a ``ProviderError`` with this adapter's user-facing wording."""
        return ProviderError(
            code=code,
            message=error_message_for(code, self._display_name, detail),
            provider=self.provider_name,
            model=model,
            raw=raw,
        )

    def _error_detail(self, exc: Exception) -> Optional[str]:
        """Return the provider-supplied detail carried by ``exc``, if any."""
        detail = extract_error_detail(getattr(exc, "body", None))
        if detail:
            return detail
        message = getattr(exc, "message", None)
        if isinstance(message, str) and message.strip():
            return message.strip()
        return str(exc).strip() or None

    def _wrap_exception(self, exc: Exception, request: ChatRequest, model: str) -> ProviderError:
        """Classify an unexpected exception into a scrubbed ``ProviderError``."""
        code = classify_exception(exc)
        detail = self._error_detail(exc)
        if detail:
            detail = scrub_secret(detail, request.credential)
        return self._error(code, model, detail=detail, raw=exc)

    def _scrubbed(self, text: Optional[str], request: ChatRequest) -> Optional[str]:
        return scrub_secret(text, request.credential) if text else text

    @staticmethod
    def _first(items: Any) -> Any:
        """Return ``items[0]`` for a non-empty list, else ``None``."""
        if isinstance(items, list) and items:
            return items[0]
        return None


__all__ = ["BaseChatAdapter"]
