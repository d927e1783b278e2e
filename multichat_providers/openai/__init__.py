"""
OpenAI provider package.

Exports:
- OpenAIProvider: Adapter implementing ProviderAdapter for OpenAI
"""

from .client import OpenAIProvider

__all__ = ["OpenAIProvider"]
