"""OpenAI and DeepSeek adapters against a mocked HTTP transport.

The real ``openai`` SDK runs; only its ``httpx`` client is swapped for one
backed by ``httpx.MockTransport``.
"""
from __future__ import annotations

import httpx
import pytest

from multichat_providers.base.errors import ErrorCode, ProviderError
from multichat_providers.base.models import Attachment, ChatRequest
from multichat_providers.deepseek import DeepseekProvider
from multichat_providers.dispatcher import Dispatcher
from multichat_providers.openai import OpenAIProvider

from .utils import json_body, openai_completion, use_transport

OPENAI_TARGET = "multichat_providers.openai.client"
DEEPSEEK_TARGET = "multichat_providers.deepseek.client"


def _ok(text: str):
    return lambda request: httpx.Response(200, json=openai_completion(text))


def test_hello_round_trip(monkeypatch):
    rec = use_transport(monkeypatch, OPENAI_TARGET, _ok("Hi there"))
    d = Dispatcher()
    resp = d.send(ChatRequest(provider_id="openai", text="Hello", credential="sk-test"))
    assert resp.text == "Hi there"  # nosec B101
    req = rec.last
    assert str(req.url) == "https://api.openai.com/v1/chat/completions"  # nosec B101
    assert req.headers["authorization"] == "Bearer sk-test"  # nosec B101
    assert json_body(req) == {  # nosec B101
        "model": "gpt-3.5-turbo",
        "messages": [{"role": "user", "content": "Hello"}],
        "temperature": 0.7,
        "max_tokens": 1000,
    }


def test_system_prompt_is_first_message(monkeypatch):
    rec = use_transport(monkeypatch, OPENAI_TARGET, _ok("ok"))
    OpenAIProvider().send(
        ChatRequest(provider_id="openai", model_id="gpt-4", text="Hi", system_prompt="Be terse", credential="k")
    )
    msgs = json_body(rec.last)["messages"]
    assert msgs == [{"role": "system", "content": "Be terse"}, {"role": "user", "content": "Hi"}]  # nosec B101


def test_vision_model_sends_image_parts(monkeypatch):
    rec = use_transport(monkeypatch, OPENAI_TARGET, _ok("A cat"))
    att = Attachment(data=b"abc", media_type="image/png")
    OpenAIProvider().send(
        ChatRequest(
            provider_id="openai",
            model_id="gpt-4-vision-preview",
            text="What is this?",
            attachments=(att,),
            credential="k",
        )
    )
    content = json_body(rec.last)["messages"][-1]["content"]
    assert content == [  # nosec B101
        {"type": "text", "text": "What is this?"},
        {"type": "image_url", "image_url": {"url": "data:image/png;base64,YWJj"}},
    ]


def test_non_vision_model_ignores_images(monkeypatch, log_records):
    rec = use_transport(monkeypatch, OPENAI_TARGET, _ok("ok"))
    att = Attachment(data=b"abc", media_type="image/png")
    OpenAIProvider().send(
        ChatRequest(provider_id="openai", model_id="gpt-4", text="Hi", attachments=(att,), credential="k")
    )
    assert json_body(rec.last)["messages"][-1]["content"] == "Hi"  # nosec B101
    ignored = [e for e in log_records.events() if e.get("event") == "attachments.ignored"]
    assert ignored and ignored[0]["count"] == 1  # nosec B101


def test_401_maps_to_authentication_failed(monkeypatch, log_records):
    def handler(request):
        return httpx.Response(401, json={"error": {"message": "Incorrect API key provided: sk-bad"}})

    use_transport(monkeypatch, OPENAI_TARGET, handler)
    with pytest.raises(ProviderError) as ei:
        OpenAIProvider().send(ChatRequest(provider_id="openai", model_id="gpt-4", text="Hi", credential="sk-bad"))
    err = ei.value
    assert err.code is ErrorCode.AUTHENTICATION_FAILED  # nosec B101
    assert err.message == "Invalid OpenAI API key. Please check your API key in settings."  # nosec B101
    assert "sk-bad" not in err.message  # nosec B101
    assert "sk-bad" not in log_records.text()  # nosec B101


def test_429_maps_to_rate_limited(monkeypatch):
    use_transport(monkeypatch, OPENAI_TARGET, lambda r: httpx.Response(429, json={"error": {"message": "slow"}}))
    with pytest.raises(ProviderError) as ei:
        OpenAIProvider().send(ChatRequest(provider_id="openai", model_id="gpt-4", text="Hi", credential="k"))
    assert ei.value.code is ErrorCode.RATE_LIMITED  # nosec B101


def test_other_status_keeps_provider_detail(monkeypatch):
    body = {"error": {"message": "The model `gpt-x` does not exist"}}
    use_transport(monkeypatch, OPENAI_TARGET, lambda r: httpx.Response(404, json=body))
    with pytest.raises(ProviderError) as ei:
        OpenAIProvider().send(ChatRequest(provider_id="openai", model_id="gpt-x", text="Hi", credential="k"))
    assert ei.value.code is ErrorCode.PROVIDER_ERROR  # nosec B101
    assert ei.value.message == "The model `gpt-x` does not exist"  # nosec B101


def test_missing_choices_is_malformed(monkeypatch):
    body = openai_completion("x")
    body["choices"] = []
    use_transport(monkeypatch, OPENAI_TARGET, lambda r: httpx.Response(200, json=body))
    with pytest.raises(ProviderError) as ei:
        OpenAIProvider().send(ChatRequest(provider_id="openai", model_id="gpt-4", text="Hi", credential="k"))
    assert ei.value.code is ErrorCode.MALFORMED_RESPONSE  # nosec B101
    assert ei.value.message == "Invalid response from OpenAI"  # nosec B101


def test_chat_events_logged_without_content(monkeypatch, log_records):
    use_transport(monkeypatch, OPENAI_TARGET, _ok("secret reply"))
    OpenAIProvider().send(
        ChatRequest(provider_id="openai", model_id="gpt-4", text="private words", credential="sk-zzz", temperature=0.2, max_tokens=9)
    )
    events = {e["event"]: e for e in log_records.events() if "event" in e}
    assert events["chat.start"]["temperature"] == 0.2  # nosec B101
    assert events["chat.end"]["response_chars"] == len("secret reply")  # nosec B101
    text = log_records.text()
    for needle in ("private words", "secret reply", "sk-zzz"):
        assert needle not in text  # nosec B101


def test_deepseek_uses_its_base_url(monkeypatch):
    rec = use_transport(monkeypatch, DEEPSEEK_TARGET, _ok("Hello from DeepSeek"))
    resp = Dispatcher().send(ChatRequest(provider_id="deepseek", text="Hello", credential="ds-key"))
    assert resp.text == "Hello from DeepSeek"  # nosec B101
    assert str(rec.last.url) == "https://api.deepseek.com/v1/chat/completions"  # nosec B101
    assert json_body(rec.last)["model"] == "deepseek-chat"  # nosec B101


def test_deepseek_ignores_images(monkeypatch):
    rec = use_transport(monkeypatch, DEEPSEEK_TARGET, _ok("ok"))
    att = Attachment(data=b"abc", media_type="image/png")
    DeepseekProvider().send(
        ChatRequest(provider_id="deepseek", model_id="deepseek-chat", text="Hi", attachments=(att,), credential="k")
    )
    assert json_body(rec.last)["messages"] == [{"role": "user", "content": "Hi"}]  # nosec B101


def test_base_url_from_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_BASE_URL", "https://proxy.example/v1")
    rec = use_transport(monkeypatch, OPENAI_TARGET, _ok("ok"))
    OpenAIProvider().send(ChatRequest(provider_id="openai", model_id="gpt-4", text="Hi", credential="k"))
    assert str(rec.last.url) == "https://proxy.example/v1/chat/completions"  # nosec B101


def test_explicit_scenario_with_blank_system_prompt(monkeypatch):
    rec = use_transport(monkeypatch, OPENAI_TARGET, _ok("Hi there"))
    resp = Dispatcher().send(
        ChatRequest(provider_id="openai", model_id="gpt-3.5-turbo", text="Hello", credential="sk-test", system_prompt="")
    )
    assert resp.text == "Hi there"  # nosec B101
    assert json_body(rec.last)["messages"] == [{"role": "user", "content": "Hello"}]  # nosec B101


def test_deepseek_401(monkeypatch):
    use_transport(monkeypatch, DEEPSEEK_TARGET, lambda r: httpx.Response(401, json={"error": {"message": "Authentication Fails"}}))
    with pytest.raises(ProviderError) as ei:
        DeepseekProvider().send(ChatRequest(provider_id="deepseek", model_id="deepseek-chat", text="Hi", credential="k"))
    assert ei.value.code is ErrorCode.AUTHENTICATION_FAILED  # nosec B101
    assert ei.value.message == "Invalid DeepSeek API key. Please check your API key in settings."  # nosec B101


def test_bad_request_mentioning_limit_keeps_provider_detail(monkeypatch):
    detail = "Unable to generate: prompt exceeds the context length limit"
    use_transport(monkeypatch, OPENAI_TARGET, lambda r: httpx.Response(400, json={"error": {"message": detail}}))
    with pytest.raises(ProviderError) as ei:
        Dispatcher().send(ChatRequest(provider_id="openai", text="Hi", credential="sk-test"))
    assert ei.value.code is ErrorCode.PROVIDER_ERROR  # nosec B101
    assert ei.value.message == detail  # nosec B101
