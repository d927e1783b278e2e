"""Dispatcher validation and routing tests.

Adapters are injected fakes; validation failures must never build or call an
adapter.
"""
from __future__ import annotations

from typing import List, Optional

import pytest

from multichat_providers.base.errors import ErrorCode, ProviderError
from multichat_providers.base.models import Attachment, ChatRequest, ChatResponse
from multichat_providers.dispatcher import Dispatcher


class _FakeAdapter:
    def __init__(self, provider: str, reply: str = "ok", error: Optional[ProviderError] = None) -> None:
        self.provider_name = provider
        self.display_name = provider
        self.sent: List[ChatRequest] = []
        self._reply = reply
        self._error = error

    def default_model(self) -> Optional[str]:
        return None

    def send(self, request: ChatRequest) -> ChatResponse:
        self.sent.append(request)
        if self._error is not None:
            raise self._error
        return ChatResponse(text=self._reply)


class _Builder:
    def __init__(self) -> None:
        self.built: List[str] = []
        self.adapters = {}

    def __call__(self, provider: str) -> _FakeAdapter:
        self.built.append(provider)
        adapter = _FakeAdapter(provider)
        self.adapters[provider] = adapter
        return adapter


@pytest.fixture()
def builder() -> _Builder:
    return _Builder()


@pytest.fixture()
def dispatcher(builder: _Builder) -> Dispatcher:
    return Dispatcher(builder=builder)


def _expect(dispatcher: Dispatcher, request: ChatRequest, code: ErrorCode) -> ProviderError:
    with pytest.raises(ProviderError) as ei:
        dispatcher.send(request)
    assert ei.value.code is code  # nosec B101
    return ei.value


def test_invalid_provider(dispatcher, builder):
    err = _expect(dispatcher, ChatRequest(provider_id="anthropic", text="hi", credential="k"), ErrorCode.INVALID_PROVIDER)
    assert err.message == "Please select a valid AI provider in settings"  # nosec B101
    assert builder.built == []  # nosec B101


def test_blank_model_is_invalid(dispatcher, builder):
    req = ChatRequest(provider_id="openai", model_id="  ", text="hi", credential="k")
    _expect(dispatcher, req, ErrorCode.INVALID_MODEL)
    assert builder.built == []  # nosec B101


def test_ollama_without_model(dispatcher, builder):
    err = _expect(dispatcher, ChatRequest(provider_id="ollama", text="hi"), ErrorCode.MISSING_MODEL)
    assert err.message == "Please select an Ollama model"  # nosec B101
    _expect(dispatcher, ChatRequest(provider_id="ollama", model_id="", text="hi"), ErrorCode.MISSING_MODEL)
    assert builder.built == []  # nosec B101


def test_missing_credential(dispatcher, builder):
    err = _expect(dispatcher, ChatRequest(provider_id="openai", text="Hello"), ErrorCode.MISSING_CREDENTIAL)
    assert err.message == "OpenAI API key is required"  # nosec B101
    _expect(dispatcher, ChatRequest(provider_id="google", text="Hello", credential="  "), ErrorCode.MISSING_CREDENTIAL)
    assert builder.built == []  # nosec B101


def test_provider_checked_before_credential(dispatcher):
    _expect(dispatcher, ChatRequest(provider_id="nope", text=""), ErrorCode.INVALID_PROVIDER)


def test_empty_message(dispatcher, builder):
    _expect(dispatcher, ChatRequest(provider_id="openai", text="   ", credential="k"), ErrorCode.EMPTY_MESSAGE)
    assert builder.built == []  # nosec B101


def test_images_only_allowed_for_vision_models(dispatcher, builder):
    att = Attachment(data=b"\x89PNG", media_type="image/png")
    _expect(
        dispatcher,
        ChatRequest(provider_id="openai", model_id="gpt-4", attachments=(att,), credential="k"),
        ErrorCode.EMPTY_MESSAGE,
    )
    resp = dispatcher.send(
        ChatRequest(provider_id="openai", model_id="gpt-4-vision-preview", attachments=(att,), credential="k")
    )
    assert resp.text == "ok"  # nosec B101


def test_defaults_applied(dispatcher, builder):
    dispatcher.send(ChatRequest(provider_id=" OpenAI ", text="Hello", credential="k"))
    (sent,) = builder.adapters["openai"].sent
    assert sent.provider_id == "openai"  # nosec B101
    assert sent.model_id == "gpt-3.5-turbo"  # nosec B101
    assert sent.temperature == 0.7  # nosec B101
    assert sent.max_tokens == 1000  # nosec B101


def test_explicit_values_kept(dispatcher, builder):
    dispatcher.send(
        ChatRequest(provider_id="deepseek", model_id="deepseek-coder", text="x", credential="k", temperature=0.0, max_tokens=5)
    )
    (sent,) = builder.adapters["deepseek"].sent
    assert (sent.model_id, sent.temperature, sent.max_tokens) == ("deepseek-coder", 0.0, 5)  # nosec B101


def test_ollama_needs_no_credential(dispatcher, builder):
    resp = dispatcher.send(ChatRequest(provider_id="ollama", model_id="llama2", text="hi"))
    assert resp.text == "ok"  # nosec B101


def test_adapter_cached(dispatcher, builder):
    for _ in range(3):
        dispatcher.send(ChatRequest(provider_id="huggingface", text="hi", credential="k"))
    assert builder.built == ["huggingface"]  # nosec B101


def test_adapter_error_propagates_unchanged(log_records):
    boom = ProviderError(code=ErrorCode.RATE_LIMITED, message="slow down", provider="openai")
    fake = _FakeAdapter("openai", error=boom)
    d = Dispatcher(adapters={"openai": fake})
    with pytest.raises(ProviderError) as ei:
        d.send(ChatRequest(provider_id="openai", text="hi", credential="sk-hidden"))
    assert ei.value is boom  # nosec B101
    events = [e for e in log_records.events() if e.get("event") == "dispatch.error"]
    assert events and events[-1]["error_code"] == "rate_limited"  # nosec B101
    assert "sk-hidden" not in log_records.text()  # nosec B101


def test_default_builder_uses_factory():
    d = Dispatcher()
    adapter = d.adapter_for("ollama")
    assert adapter.provider_name == "ollama"  # nosec B101
    assert d.adapter_for("OLLAMA") is adapter  # nosec B101
