"""Multichat providers.

One call contract for six chat APIs (google, openai, huggingface, deepseek,
ollama, openrouter)::

    from multichat_providers import ChatRequest, send

    reply = send(ChatRequest(provider_id="openai", text="Hello", credential=key))
    print(reply.text)

Failures raise :class:`ProviderError` with a normalized :class:`ErrorCode`.
"""

from .base.errors import ErrorCode, ProviderError
from .base.models import Attachment, ChatRequest, ChatResponse, ChatSettings
from .catalog import list_providers
from .dispatcher import Dispatcher, send
from .ollama.status import check_ollama_status

__all__ = [
    "Attachment",
    "ChatRequest",
    "ChatResponse",
    "ChatSettings",
    "Dispatcher",
    "ErrorCode",
    "ProviderError",
    "check_ollama_status",
    "list_providers",
    "send",
]
