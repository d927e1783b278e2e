"""
Providers Base Package

Exports provider-agnostic contracts, DTOs, the error taxonomy and the
provider factory for use by the dispatcher and the provider adapters.

- Interfaces: normalized provider boundary (``ProviderAdapter``)
- Models (DTOs): request/response/settings value objects
- Errors: ``ErrorCode`` and ``ProviderError``
- Factory: lazy creation of provider adapters by provider id
"""

from .errors import ErrorCode, ProviderError
from .factory import ProviderFactory, UnknownProviderError
from .interfaces import ProviderAdapter
from .models import (
    Attachment,
    ChatRequest,
    ChatResponse,
    ChatSettings,
    ProviderId,
)
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Models
    "Attachment",
    "ChatRequest",
    "ChatResponse",
    "ChatSettings",
    "ProviderId",
    # Errors
    "ErrorCode",
    "ProviderError",
    # Interfaces
    "ProviderAdapter",
    # Factory
    "ProviderFactory",
    "UnknownProviderError",
    # Timeouts
    "TimeoutConfig",
    "get_timeout_config",
]
