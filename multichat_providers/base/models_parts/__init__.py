"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`multichat_providers.base.models_parts` if needed, while
`multichat_providers.base.models` remains the primary stable import path.
"""

from .attachment import Attachment
from .provider_id import ProviderId
from .chat_request import ChatRequest
from .chat_response import ChatResponse
from .chat_settings import ChatSettings

__all__ = [
    "Attachment",
    "ProviderId",
    "ChatRequest",
    "ChatResponse",
    "ChatSettings",
]
