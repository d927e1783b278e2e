"""Message construction helpers shared across providers.

This module turns a normalized ``ChatRequest`` into the role/content message
list used by the OpenAI-compatible wire formats (openai, deepseek,
openrouter, ollama). Helpers here are side-effect free.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..models import ChatRequest
from .images import EncodedImage

# Providers whose "*vision*" models accept inline images.
VISION_PROVIDERS = frozenset({"google", "openai"})


def is_vision_model(provider_id: Optional[str], model_id: Optional[str]) -> bool:
    """Return True when ``model_id`` accepts image attachments on ``provider_id``."""
    provider = (provider_id or "").lower().strip()
    return provider in VISION_PROVIDERS and "vision" in (model_id or "").lower()


def build_messages(
    request: ChatRequest,
    images: Sequence[EncodedImage] = (),
) -> List[Dict[str, Any]]:
    """Build the native message list for ``request``.

    Summary
    - A ``system`` turn is emitted first when the request carries a non-empty
      system prompt.
    - One ``user`` turn follows. Without images its content is the plain
      text. With images the content is a part list: one ``text`` part, then
      one ``image_url`` part per image with a ``data:`` URI, in order.

    Parameters
    - request: Normalized request (already validated by the dispatcher).
    - images: Encoded attachments; pass them only for vision models.
    """
    messages: List[Dict[str, Any]] = []
    if request.has_system_prompt:
        messages.append({"role": "system", "content": request.system_prompt})
    if not images:
        messages.append({"role": "user", "content": request.text})
        return messages
    parts: List[Dict[str, Any]] = [{"type": "text", "text": request.text}]
    parts.extend(
        {"type": "image_url", "image_url": {"url": image.data_uri}} for image in images
    )
    messages.append({"role": "user", "content": parts})
    return messages


__all__ = ["VISION_PROVIDERS", "build_messages", "is_vision_model"]
