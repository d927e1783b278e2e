"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``multichat_providers.base.models_parts``.
"""

from .models_parts.attachment import Attachment
from .models_parts.provider_id import ProviderId
from .models_parts.chat_request import ChatRequest
from .models_parts.chat_response import ChatResponse
from .models_parts.chat_settings import ChatSettings

__all__ = [
    "Attachment",
    "ProviderId",
    "ChatRequest",
    "ChatResponse",
    "ChatSettings",
]
