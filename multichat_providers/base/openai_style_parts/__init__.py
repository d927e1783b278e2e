"""Split modules for the OpenAI-style provider base abstraction.

Re-exports provide a stable import surface for convenience.
"""

from .base import BaseOpenAIStyleProvider
from .client_protocol import _ChatCompletionsClient
from .provider_init import _ProviderInit

__all__ = [
    "BaseOpenAIStyleProvider",
    "_ChatCompletionsClient",
    "_ProviderInit",
]
