"""Unit tests for the request/response DTOs.

Covers:
- Attachment freezes mutable buffers and rejects non-bytes data.
- ChatRequest keeps the credential out of repr and to_dict.
- ChatSettings.to_request picks the selected provider's credential.
- ProviderId parsing.
"""
from __future__ import annotations

import pytest

from multichat_providers.base.models import (
    Attachment,
    ChatRequest,
    ChatResponse,
    ChatSettings,
    ProviderId,
)


def test_attachment_copies_bytearray_to_bytes():
    buf = bytearray(b"\x89PNG")
    att = Attachment(data=buf, media_type="image/png")
    buf[0] = 0
    assert att.data == b"\x89PNG"  # nosec B101
    assert isinstance(att.data, bytes)  # nosec B101
    assert att.size == 4  # nosec B101


def test_attachment_rejects_text():
    with pytest.raises(TypeError):
        Attachment(data="not bytes", media_type="image/png")  # type: ignore[arg-type]


def test_request_hides_credential():
    req = ChatRequest(provider_id="openai", text="Hello", credential="sk-secret")
    assert "sk-secret" not in repr(req)  # nosec B101
    payload = req.to_dict()
    assert "sk-secret" not in str(payload)  # nosec B101
    assert payload["has_credential"] is True  # nosec B101


def test_request_coerces_attachment_list_to_tuple():
    att = Attachment(data=b"x", media_type="image/jpeg")
    req = ChatRequest(provider_id="openai", attachments=[att])  # type: ignore[arg-type]
    assert req.attachments == (att,)  # nosec B101
    assert req.to_dict()["attachments"] == [{"media_type": "image/jpeg", "size": 1}]  # nosec B101


def test_has_system_prompt_ignores_blank():
    assert not ChatRequest(provider_id="openai", system_prompt="  ").has_system_prompt  # nosec B101
    assert ChatRequest(provider_id="openai", system_prompt="Be terse").has_system_prompt  # nosec B101


def test_settings_to_request_selects_provider_key():
    settings = ChatSettings(provider_id="deepseek", model_id="deepseek-chat", system_prompt="")
    req = settings.to_request("hi", credentials={"openai": "sk-o", "deepseek": "sk-d"})
    assert req.credential == "sk-d"  # nosec B101
    assert req.system_prompt is None  # nosec B101
    assert req.temperature == 0.7 and req.max_tokens == 1000  # nosec B101


def test_settings_without_key_yields_no_credential():
    req = ChatSettings(provider_id="ollama", model_id="llama2").to_request("hi")
    assert req.credential is None  # nosec B101


def test_provider_id_parse_and_credential_requirement():
    assert ProviderId.parse(" OpenRouter ") is ProviderId.OPENROUTER  # nosec B101
    assert ProviderId.parse("anthropic") is None  # nosec B101
    assert ProviderId.parse(None) is None  # nosec B101
    assert not ProviderId.OLLAMA.requires_credential  # nosec B101
    assert all(p.requires_credential for p in ProviderId if p is not ProviderId.OLLAMA)  # nosec B101


def test_response_to_dict():
    assert ChatResponse(text="Hi there").to_dict() == {"text": "Hi there"}  # nosec B101
