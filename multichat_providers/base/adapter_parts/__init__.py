"""Shared adapter base classes.

``BaseChatAdapter`` carries the send orchestration common to all providers;
``BaseHttpChatAdapter`` adds the JSON-over-httpx call used by providers
without an SDK. SDK-backed OpenAI-compatible providers build on
``multichat_providers.base.openai_style_parts``.
"""

from .chat_adapter import BaseChatAdapter
from .http_adapter import BaseHttpChatAdapter

__all__ = ["BaseChatAdapter", "BaseHttpChatAdapter"]
