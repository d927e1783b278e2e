"""multichat_providers.config.defaults
===================================

Central place for small, stable default values used across the
multichat_providers package and the lightweight service layer. Endpoint
values can be overridden via environment variables or an external config
file (see :mod:`multichat_providers.config`), but provide sensible fallbacks
for local development and tests.

Module Purpose
--------------
- Provide a single import location for conservative default constants (no I/O).
- Hold the per-provider default model table applied by the dispatcher.

This module intentionally avoids importing from other packages to prevent
circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

from typing import Dict, Optional

# ---- Generation defaults ----
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1000

# ---- Provider ids (dispatch order is not significant) ----
PROVIDER_IDS = (
    "google",
    "openai",
    "huggingface",
    "deepseek",
    "ollama",
    "openrouter",
)

# ---- Provider-specific sane defaults ----
GOOGLE_DEFAULT_MODEL = "gemini-pro"

OPENAI_DEFAULT_MODEL = "gpt-3.5-turbo"
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"

HUGGINGFACE_DEFAULT_MODEL = "mistralai/Mixtral-8x7B-Instruct-v0.1"
HUGGINGFACE_DEFAULT_BASE_URL = "https://api-inference.huggingface.co"

DEEPSEEK_DEFAULT_MODEL = "deepseek-chat"
DEEPSEEK_DEFAULT_BASE_URL = "https://api.deepseek.com/v1"

OPENROUTER_DEFAULT_MODEL = "openai/gpt-3.5-turbo"
OPENROUTER_DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
# Identifying headers OpenRouter uses to attribute traffic to an app.
OPENROUTER_DEFAULT_REFERER = "http://localhost:3000"
OPENROUTER_DEFAULT_TITLE = "Multichat"

# Ollama (local daemon) has no default model: the user must pick one.
OLLAMA_DEFAULT_HOST = "http://localhost:11434"

# Applied once, at request-normalization time, when model_id is None.
DEFAULT_MODELS: Dict[str, Optional[str]] = {
    "google": GOOGLE_DEFAULT_MODEL,
    "openai": OPENAI_DEFAULT_MODEL,
    "huggingface": HUGGINGFACE_DEFAULT_MODEL,
    "deepseek": DEEPSEEK_DEFAULT_MODEL,
    "ollama": None,
    "openrouter": OPENROUTER_DEFAULT_MODEL,
}

# ---- Transport ----
DEFAULT_HTTP_TIMEOUT_SECONDS = 60.0
# Worker cap for parallel attachment encoding.
ATTACHMENT_ENCODE_MAX_WORKERS = 4

# ---- Service / HTTP layer ----
# Comma-separated list of allowed origins for the browser UI dev server.
SERVICE_CORS_DEFAULT_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"


__all__ = [
    "DEFAULT_TEMPERATURE",
    "DEFAULT_MAX_TOKENS",
    "PROVIDER_IDS",
    "GOOGLE_DEFAULT_MODEL",
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_DEFAULT_BASE_URL",
    "HUGGINGFACE_DEFAULT_MODEL",
    "HUGGINGFACE_DEFAULT_BASE_URL",
    "DEEPSEEK_DEFAULT_MODEL",
    "DEEPSEEK_DEFAULT_BASE_URL",
    "OPENROUTER_DEFAULT_MODEL",
    "OPENROUTER_DEFAULT_BASE_URL",
    "OPENROUTER_DEFAULT_REFERER",
    "OPENROUTER_DEFAULT_TITLE",
    "OLLAMA_DEFAULT_HOST",
    "DEFAULT_MODELS",
    "DEFAULT_HTTP_TIMEOUT_SECONDS",
    "ATTACHMENT_ENCODE_MAX_WORKERS",
    "SERVICE_CORS_DEFAULT_ORIGINS",
]
