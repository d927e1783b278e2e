"""Protocol definition for OpenAI-style chat completions clients.

Describes the minimal client surface required by ``BaseOpenAIStyleProvider``
without tying the base class to a concrete SDK implementation (tests may
substitute a fake).
"""

from __future__ import annotations

from typing import Any, Protocol


class _ChatCompletionsClient(Protocol):
    """Protocol describing an OpenAI-compatible chat completions client.

    Implementations expose ``chat.completions.create(**params)`` returning a
    response object with ``choices[0].message.content``.
    """

    class _ChatNS(Protocol):  # pragma: no cover - structural hint only
        class _CompletionsNS(Protocol):
            def create(self, **params: Any) -> Any:  # noqa: D401 - SDK parity
                """Run a non-streaming chat completion request."""
                ...

        completions: _CompletionsNS

    chat: _ChatNS


__all__ = ["_ChatCompletionsClient"]
