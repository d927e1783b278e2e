"""
Provider-agnostic interfaces (Protocols) for the providers layer.

Re-exports Protocols defined in single-class modules under
``multichat_providers.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import ProviderAdapter

__all__ = [
    "ProviderAdapter",
]
