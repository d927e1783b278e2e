"""Shared testing utilities for the adapter tests.

Exports:
    - RecordedTransport: ``httpx.MockTransport`` wrapper remembering requests.
    - use_transport(monkeypatch, target, handler) -> RecordedTransport
    - json_body(request) -> Any
    - openai_completion(text) -> dict
"""
from __future__ import annotations

import json
from typing import Any, Callable, List

import httpx


class RecordedTransport:
    """Route requests through ``handler`` and keep every request seen."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def use_transport(monkeypatch, target: str, handler: Callable[[httpx.Request], httpx.Response]) -> RecordedTransport:
    """Patch ``<target>.get_httpx_client`` to hand out mock-transport clients.

    ``target`` is the dotted module path whose ``get_httpx_client`` name the
    code under test looks up at call time.
    """
    recorder = RecordedTransport(handler)

    def _client(base_url, purpose):
        kwargs = {"transport": httpx.MockTransport(recorder)}
        if base_url:
            kwargs["base_url"] = base_url
        return httpx.Client(**kwargs)

    monkeypatch.setattr(f"{target}.get_httpx_client", _client)
    return recorder


def json_body(request: httpx.Request) -> Any:
    return json.loads(request.content.decode("utf-8"))


def openai_completion(text: str, model: str = "gpt-3.5-turbo") -> dict:
    """Minimal Chat Completions response body."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": text},
                "finish_reason": "stop",
            }
        ],
    }
