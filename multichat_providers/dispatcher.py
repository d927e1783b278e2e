"""Request validation and provider dispatch.

The :class:`Dispatcher` is the single entry point of the chat core. For each
send it:

1. validates and normalizes the request (provider id, model selection,
   credential presence, message content, sampling defaults) without touching
   any adapter or the network;
2. selects the adapter for the provider id from its registry (adapters are
   created lazily through :class:`ProviderFactory` unless injected);
3. returns the adapter's ``ChatResponse`` or lets its ``ProviderError``
   propagate unchanged.

There are no retries and no deadline beyond the transport timeout.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Callable, Dict, Mapping, Optional

from .base.errors import (
    EMPTY_MESSAGE_MESSAGE,
    INVALID_MODEL_MESSAGE,
    INVALID_PROVIDER_MESSAGE,
    ErrorCode,
    ProviderError,
    missing_credential_message,
    missing_model_message,
)
from .base.factory import ProviderFactory
from .base.interfaces import ProviderAdapter
from .base.logging import LogContext, get_logger, normalized_log_event
from .base.models import ChatRequest, ChatResponse, ProviderId
from .base.utils.messages import is_vision_model
from .catalog import display_name
from .config.defaults import DEFAULT_MAX_TOKENS, DEFAULT_MODELS, DEFAULT_TEMPERATURE

AdapterBuilder = Callable[[str], ProviderAdapter]

_logger = get_logger("multichat.dispatcher")


class Dispatcher:
    """Validate chat requests and route them to provider adapters.

    Parameters:
        adapters: Optional mapping of provider id to adapter instance. Injected
            adapters take precedence over factory-built ones (tests, embedding).
        builder: Callable creating an adapter for a provider id; defaults to
            :meth:`ProviderFactory.create`.

    Adapters are stateless, so one instance per provider id is cached and
    shared across concurrent sends.
    """

    def __init__(
        self,
        adapters: Optional[Mapping[str, ProviderAdapter]] = None,
        builder: Optional[AdapterBuilder] = None,
    ) -> None:
        self._adapters: Dict[str, ProviderAdapter] = {
            k.lower().strip(): v for k, v in (adapters or {}).items()
        }
        self._builder: AdapterBuilder = builder or ProviderFactory.create
        self._lock = threading.Lock()

    def send(self, request: ChatRequest) -> ChatResponse:
        """Validate ``request`` and send it through the selected adapter.

        Raises:
            ProviderError: validation failure (raised before any adapter is
                built) or the adapter's normalized failure.
        """
        try:
            normalized = self.normalize(request)
        except ProviderError as err:
            self._log_error(err)
            raise
        ctx = LogContext(provider=normalized.provider_id, model=normalized.model_id)
        normalized_log_event(
            _logger,
            "dispatch.start",
            ctx,
            phase="dispatch",
            attachment_count=len(normalized.attachments),
        )
        try:
            return self.adapter_for(normalized.provider_id).send(normalized)
        except ProviderError as err:
            self._log_error(err)
            raise

    def normalize(self, request: ChatRequest) -> ChatRequest:
        """Return ``request`` validated, with provider id, model and defaults filled.

        Validation order: provider, model, credential, content.
        """
        pid = ProviderId.parse(request.provider_id)
        if pid is None:
            raise ProviderError(
                code=ErrorCode.INVALID_PROVIDER,
                message=INVALID_PROVIDER_MESSAGE,
                provider=(request.provider_id or "").strip(),
            )
        name = display_name(pid.value)
        model = self._resolve_model(pid, request.model_id, name)

        if pid.requires_credential and not (request.credential or "").strip():
            raise ProviderError(
                code=ErrorCode.MISSING_CREDENTIAL,
                message=missing_credential_message(name),
                provider=pid.value,
                model=model,
            )

        usable_images = bool(request.attachments) and is_vision_model(pid.value, model)
        if not (request.text or "").strip() and not usable_images:
            raise ProviderError(
                code=ErrorCode.EMPTY_MESSAGE,
                message=EMPTY_MESSAGE_MESSAGE,
                provider=pid.value,
                model=model,
            )

        return replace(
            request,
            provider_id=pid.value,
            model_id=model,
            temperature=DEFAULT_TEMPERATURE if request.temperature is None else request.temperature,
            max_tokens=DEFAULT_MAX_TOKENS if request.max_tokens is None else request.max_tokens,
        )

    def adapter_for(self, provider_id: str) -> ProviderAdapter:
        """Return the cached adapter for ``provider_id``, building it on first use."""
        key = provider_id.lower().strip()
        adapter = self._adapters.get(key)
        if adapter is not None:
            return adapter
        with self._lock:
            adapter = self._adapters.get(key)
            if adapter is None:
                adapter = self._builder(key)
                self._adapters[key] = adapter
            return adapter

    @staticmethod
    def _resolve_model(pid: ProviderId, model_id: Optional[str], name: str) -> str:
        """Apply the default model table; reject blank or missing selections."""
        if model_id is None:
            model_id = DEFAULT_MODELS.get(pid.value)
            if model_id is None:
                raise ProviderError(
                    code=ErrorCode.MISSING_MODEL,
                    message=missing_model_message(name),
                    provider=pid.value,
                )
            return model_id
        if not model_id.strip():
            if pid is ProviderId.OLLAMA:
                raise ProviderError(
                    code=ErrorCode.MISSING_MODEL,
                    message=missing_model_message(name),
                    provider=pid.value,
                )
            raise ProviderError(
                code=ErrorCode.INVALID_MODEL,
                message=INVALID_MODEL_MESSAGE,
                provider=pid.value,
            )
        return model_id

    @staticmethod
    def _log_error(err: ProviderError) -> None:
        normalized_log_event(
            _logger,
            "dispatch.error",
            LogContext(provider=err.provider or None, model=err.model),
            phase="dispatch",
            error_code=err.code.value,
        )


_default: Optional[Dispatcher] = None
_default_lock = threading.Lock()


def get_dispatcher() -> Dispatcher:
    """Return the process-wide default :class:`Dispatcher`."""
    global _default  # noqa: PLW0603 - module-level singleton
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Dispatcher()
    return _default


def send(request: ChatRequest) -> ChatResponse:
    """Send ``request`` through the default dispatcher."""
    return get_dispatcher().send(request)


__all__ = ["Dispatcher", "get_dispatcher", "send"]
