"""Provider Factory utilities.

Purpose
-------
Centralize creation of adapter instances implementing the ``ProviderAdapter``
interface. Adapters are imported lazily using ``importlib`` so that selecting
``ollama`` never imports the Google or OpenAI SDKs.

Timeout and fallback semantics
------------------------------
- No timeouts are introduced here. The factory performs no retries or
  fallbacks; it either returns an instance or raises a clear error.

Scope
-----
Supported providers: ``google``, ``openai``, ``huggingface``, ``deepseek``,
``ollama`` and ``openrouter``.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Tuple, Type


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or initialized.

    Failure modes include:
    - The provider name is not registered in the factory mapping.
    - The provider module cannot be imported or the adapter class is missing.
    - The adapter constructor raised an exception during initialization.
    """


def create_provider(provider: str, **kwargs: Any) -> Any:
    """Compatibility helper that delegates to :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, **kwargs)


class ProviderFactory:
    """Create provider adapters based on a provider id (e.g., ``"openai"``).

    Design notes
    ------------
    - Uses ``importlib.import_module`` for explicit import semantics.
    - Raises :class:`UnknownProviderError` with precise, actionable messages
      for unknown providers, import failures, missing classes, and constructor
      errors.
    """

    # Map provider ids to import paths and class names
    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "google": {"module": "multichat_providers.gemini.client", "class": "GeminiProvider"},
        "openai": {"module": "multichat_providers.openai.client", "class": "OpenAIProvider"},
        "huggingface": {"module": "multichat_providers.huggingface.client", "class": "HuggingFaceProvider"},
        "deepseek": {"module": "multichat_providers.deepseek.client", "class": "DeepseekProvider"},
        "ollama": {"module": "multichat_providers.ollama.client", "class": "OllamaProvider"},
        "openrouter": {"module": "multichat_providers.openrouter.client", "class": "OpenRouterProvider"},
    }

    @classmethod
    def create(cls, provider: str, **kwargs: Any) -> Any:
        """Create a provider adapter instance.

        Parameters
        ----------
        provider:
            Provider id (e.g., ``"openai"``), case-insensitive.
        **kwargs:
            Adapter-specific constructor kwargs (optional), e.g. ``host`` for
            ollama or ``base_url`` for the HTTP providers.

        Returns
        -------
        Any
            Instance implementing ``ProviderAdapter``.

        Raises
        ------
        UnknownProviderError
            If provider is unknown, the adapter module fails to import, the
            adapter class is missing, or the adapter constructor raises.
        """
        name = (provider or "").lower().strip()
        spec = cls._PROVIDERS.get(name)
        if not spec:
            raise UnknownProviderError(f"Unknown provider '{provider}'")

        module_path, class_name = spec["module"], spec["class"]

        try:
            mod = import_module(module_path)
        except ImportError as exc:  # pragma: no cover - import failure path
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
            ) from exc

        try:
            klass: Type = getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{provider}'"
            ) from exc

        try:
            return klass(**kwargs)
        except TypeError as exc:
            raise UnknownProviderError(
                f"Invalid arguments for '{provider}' adapter constructor: {exc}"
            ) from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported provider ids in deterministic order."""
        return tuple(cls._PROVIDERS.keys())


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider"]
