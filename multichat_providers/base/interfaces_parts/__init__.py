"""Interfaces (Protocols) split into single-class modules.

``multichat_providers.base.interfaces`` re-exports them as a stable API.
"""

from .provider_adapter import ProviderAdapter

__all__ = [
    "ProviderAdapter",
]
