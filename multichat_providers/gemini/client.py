"""GeminiProvider adapter.

Uses google-genai (``from google import genai``): a ``genai.Client`` is built
per call from the request credential, so no key lives in module state.

``*vision*`` models (``gemini-pro-vision``) receive image attachments as
inline data parts after the text; other models ignore them.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from google import genai
from google.genai import types

from ..base.adapter_parts import BaseChatAdapter
from ..base.models import ChatRequest
from ..base.timeouts import get_timeout_config
from ..base.utils.images import EncodedImage, decode_image
from ..config.defaults import GOOGLE_DEFAULT_MODEL


class GeminiProvider(BaseChatAdapter):
    """Gemini provider for chat using the Google Gen AI SDK.

    Registered under the provider id ``google``.
    """

    def __init__(self) -> None:
        super().__init__(
            display_name="Google",
            default_model=GOOGLE_DEFAULT_MODEL,
            logger_name="multichat.gemini",
        )

    @property
    def provider_name(self) -> str:
        """Return the provider id callers select (``google``)."""
        return "google"

    def _invoke(self, request: ChatRequest, model: str, images: Sequence[EncodedImage]) -> Optional[str]:
        client = self._make_client(request.credential or "")
        resp = client.models.generate_content(
            model=model,
            contents=self._build_contents(request, images),
            config=self._build_config(request),
        )
        return self._extract_text_from_response(resp)

    # -------------------- internal helpers --------------------
    def _make_client(self, api_key: str) -> Any:
        timeout_ms = int(get_timeout_config().http_timeout_seconds * 1000)
        return genai.Client(api_key=api_key, http_options=types.HttpOptions(timeout=timeout_ms))

    def _build_contents(self, request: ChatRequest, images: Sequence[EncodedImage]) -> Any:
        """Return the text alone, or ``[text, *inline_image_parts]`` for vision.

        ``images`` is only non-empty for vision models. Parts follow its order;
        the SDK expects raw bytes and base64-encodes them on the wire.
        """
        if not images:
            return request.text
        contents: List[Any] = [request.text]
        contents.extend(
            types.Part.from_bytes(data=decode_image(image.data), mime_type=image.media_type)
            for image in images
        )
        return contents

    def _build_config(self, request: ChatRequest) -> types.GenerateContentConfig:
        """Map sampling parameters and the system prompt to the SDK config.

        'max_output_tokens' is a public API parameter name, not a secret.
        """
        return types.GenerateContentConfig(
            temperature=request.temperature,
            max_output_tokens=request.max_tokens,  # nosec B106
            system_instruction=request.system_prompt if request.has_system_prompt else None,
        )

    def _extract_text_from_response(self, resp: Any) -> Optional[str]:
        """Extract final text from a ``generate_content`` response.

        Returns ``None`` when the response has no text (blocked prompt, empty
        candidates) so the caller raises ``MALFORMED_RESPONSE``.
        """
        try:
            text = resp.text
        except (AttributeError, ValueError, TypeError):
            return None
        return text if isinstance(text, str) else None


__all__ = ["GeminiProvider"]
