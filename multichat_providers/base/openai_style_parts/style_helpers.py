"""
Helper utilities for OpenAI-style Chat Completions providers.

Purpose:
- Provide safe translations between ``ChatRequest`` and OpenAI-style SDK
  params.
- Extract the reply text from SDK response objects without brittle
  introspection.

No direct network I/O; functions only prepare inputs or interpret outputs.
"""

from __future__ import annotations

import typing as _t

from ..models import ChatRequest
from ..utils.images import EncodedImage
from ..utils.messages import build_messages


def extract_openai_text(resp: _t.Any) -> _t.Optional[str]:
    """Extract assistant text from an OpenAI-style non-streaming response.

    Returns ``None`` when the expected ``choices[0].message.content`` path is
    missing so the caller can raise ``MALFORMED_RESPONSE``.
    """
    choices = getattr(resp, "choices", None)
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    return content if isinstance(content, str) else None


def build_chat_params(
    model: str,
    request: ChatRequest,
    images: _t.Sequence[EncodedImage] = (),
) -> dict:
    """Assemble parameters for an OpenAI-style chat completion call.

    Parameters:
        model: The model identifier string.
        request: The normalized request (sampling defaults already applied).
        images: Encoded attachments for vision models.

    Returns:
        A dict suitable for ``client.chat.completions.create(**params)``.
    """
    params: dict = {"model": model, "messages": build_messages(request, images)}
    if request.temperature is not None:
        params["temperature"] = float(request.temperature)
    if request.max_tokens is not None:
        params["max_tokens"] = int(request.max_tokens)
    return params


__all__ = ["extract_openai_text", "build_chat_params"]
