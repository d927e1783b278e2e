"""Provider and model catalog shown by the settings UI.

The catalog is static data: the six supported providers, the models offered
for each, and whether a model accepts image attachments. ``display_name``
(the short name used in error messages, e.g. ``"Google"``) differs from the
settings label ``name`` (``"Google Gemini"``) for some providers.

Ollama's list is a suggestion only; installed models come from
:func:`multichat_providers.ollama.check_ollama_status`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .base.models import ProviderId
from .base.utils.messages import is_vision_model


@dataclass(frozen=True)
class ModelInfo:
    """One selectable model."""

    id: str
    name: str
    description: str = ""
    vision: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "vision": self.vision,
        }


@dataclass(frozen=True)
class ProviderInfo:
    """One provider entry in the settings list.

    Attributes:
        id: Provider id sent on ``ChatRequest.provider_id``.
        name: Settings label.
        display_name: Short name used in user-facing error messages.
        description: One-line blurb for the settings UI.
        requires_key: Whether a credential must accompany each request.
        models: Suggested models, default model first.
    """

    id: str
    name: str
    display_name: str
    description: str
    requires_key: bool
    models: Tuple[ModelInfo, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "display_name": self.display_name,
            "description": self.description,
            "requires_key": self.requires_key,
            "models": [m.to_dict() for m in self.models],
        }


def _model(provider: ProviderId, model_id: str, name: str, description: str) -> ModelInfo:
    return ModelInfo(
        id=model_id,
        name=name,
        description=description,
        vision=is_vision_model(provider.value, model_id),
    )


_G = ProviderId.GOOGLE
_O = ProviderId.OPENAI
_L = ProviderId.OLLAMA
_H = ProviderId.HUGGINGFACE
_D = ProviderId.DEEPSEEK
_R = ProviderId.OPENROUTER

PROVIDERS: Tuple[ProviderInfo, ...] = (
    ProviderInfo(
        id=_G.value,
        name="Google Gemini",
        display_name="Google",
        description="Google's latest AI models",
        requires_key=True,
        models=(
            _model(_G, "gemini-pro", "Gemini Pro", "Latest Gemini model for text generation"),
            _model(_G, "gemini-pro-vision", "Gemini Pro Vision", "Gemini model that can understand images and text"),
        ),
    ),
    ProviderInfo(
        id=_O.value,
        name="OpenAI",
        display_name="OpenAI",
        description="GPT-3.5 and GPT-4 models",
        requires_key=True,
        models=(
            _model(_O, "gpt-3.5-turbo", "GPT-3.5 Turbo", "Fast and efficient language model"),
            _model(_O, "gpt-4", "GPT-4", "Most capable OpenAI model"),
            _model(_O, "gpt-4-vision-preview", "GPT-4 Vision", "GPT-4 with image understanding capabilities"),
        ),
    ),
    ProviderInfo(
        id=_L.value,
        name="Ollama (Local)",
        display_name="Ollama",
        description="Run AI models locally on your machine",
        requires_key=False,
        models=(
            _model(_L, "llama2", "Llama 2", "Meta's open source language model"),
            _model(_L, "mistral", "Mistral", "Efficient and powerful language model"),
            _model(_L, "codellama", "Code Llama", "Specialized for code generation"),
        ),
    ),
    ProviderInfo(
        id=_H.value,
        name="Hugging Face",
        display_name="Hugging Face",
        description="Access to various open source models",
        requires_key=True,
        models=(
            _model(_H, "mistralai/Mixtral-8x7B-Instruct-v0.1", "Mixtral 8x7B", "Powerful mixture of experts model"),
            _model(_H, "meta-llama/Llama-2-70b-chat-hf", "LLaMA2 70B", "Largest LLaMA2 model"),
        ),
    ),
    ProviderInfo(
        id=_D.value,
        name="DeepSeek",
        display_name="DeepSeek",
        description="Specialized AI models",
        requires_key=True,
        models=(
            _model(_D, "deepseek-chat", "DeepSeek Chat", "General purpose chat model"),
            _model(_D, "deepseek-coder", "DeepSeek Coder", "Specialized for code generation"),
        ),
    ),
    ProviderInfo(
        id=_R.value,
        name="OpenRouter",
        display_name="OpenRouter",
        description="Access to various commercial models",
        requires_key=True,
        models=(
            _model(_R, "openai/gpt-3.5-turbo", "GPT-3.5 Turbo", "OpenAI's GPT-3.5 via OpenRouter"),
            _model(_R, "openai/gpt-4-turbo", "GPT-4 Turbo", "Latest GPT-4 model via OpenRouter"),
            _model(_R, "anthropic/claude-2.1", "Claude 2.1", "Anthropic's latest model"),
            _model(_R, "google/gemini-pro", "Gemini Pro", "Google's latest model via OpenRouter"),
        ),
    ),
)

_BY_ID: Dict[str, ProviderInfo] = {p.id: p for p in PROVIDERS}


def list_providers() -> List[ProviderInfo]:
    """Return every provider in settings order."""
    return list(PROVIDERS)


def get_provider(provider_id: Optional[str]) -> Optional[ProviderInfo]:
    """Return the entry for ``provider_id`` (case-insensitive) or ``None``."""
    pid = ProviderId.parse(provider_id)
    return _BY_ID.get(pid.value) if pid else None


def display_name(provider_id: Optional[str]) -> str:
    """Return the error-message name for ``provider_id``.

    Unknown ids fall back to the raw value so messages stay readable.
    """
    info = get_provider(provider_id)
    return info.display_name if info else (provider_id or "").strip()


__all__ = [
    "ModelInfo",
    "ProviderInfo",
    "PROVIDERS",
    "display_name",
    "get_provider",
    "is_vision_model",
    "list_providers",
]
