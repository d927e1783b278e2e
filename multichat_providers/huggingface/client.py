"""Hugging Face Inference API adapter.

One POST to ``<base>/models/<model>`` with bearer auth and a flattened
prompt string. The API answers ``{"generated_text": ...}``, or a one-element
list of that object for text-generation pipelines; both are accepted.
Text only: attachments are logged and ignored.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..base.adapter_parts import BaseHttpChatAdapter
from ..base.models import ChatRequest
from ..base.utils.images import EncodedImage
from ..config import get_provider_config
from ..config.defaults import HUGGINGFACE_DEFAULT_BASE_URL, HUGGINGFACE_DEFAULT_MODEL
from .helpers import build_payload


class HuggingFaceProvider(BaseHttpChatAdapter):
    """Adapter for hosted text-generation models on Hugging Face."""

    def __init__(self, base_url: Optional[str] = None) -> None:
        cfg = get_provider_config("huggingface")
        super().__init__(
            base_url=base_url or cfg.get("base_url") or HUGGINGFACE_DEFAULT_BASE_URL,
            display_name="Hugging Face",
            default_model=HUGGINGFACE_DEFAULT_MODEL,
            logger_name="multichat.huggingface",
        )

    @property
    def provider_name(self) -> str:
        return "huggingface"

    def _path(self, model: str) -> str:
        # Model ids are "org/name"; the slash stays part of the path.
        return f"/models/{model}"

    def _payload(self, request: ChatRequest, model: str, images: Sequence[EncodedImage]) -> Dict[str, Any]:
        return build_payload(request)

    def _extract_text(self, body: Any) -> Optional[str]:
        """Return ``generated_text`` from the object or the one-element list."""
        if isinstance(body, list):
            body = self._first(body)
        if not isinstance(body, dict):
            return None
        text = body.get("generated_text")
        return text if isinstance(text, str) else None


__all__ = ["HuggingFaceProvider"]
