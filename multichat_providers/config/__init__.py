"""Unified configuration layer for providers.

Goals
-----
* Centralize endpoint defaults (base URLs, hosts, attribution headers).
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by MULTICHAT_CONFIG_FILE
    3. Environment variables (e.g. OPENAI_BASE_URL, OLLAMA_HOST)
    4. In-code overrides passed to helper
* Provide a single call site: ``get_provider_config(provider: str)``.

API keys are never part of this layer. The caller passes the credential on
each request; any ``api_key`` entry found in a config file is dropped.

Environment Variable Conventions
--------------------------------
<PROVIDER>_BASE_URL, <PROVIDER>_HOST, plus
OPENROUTER_REFERER / OPENROUTER_TITLE for the OpenRouter attribution headers.

External Config File (Optional)
-------------------------------
If MULTICHAT_CONFIG_FILE is set to a path, we attempt to load JSON first and
fall back to YAML. Structure example:

```
openai:
  base_url: https://api.openai.com/v1
ollama:
  host: http://gpu-box:11434
openrouter:
  title: "My Chat"
```

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import json
import os

import yaml

from .defaults import (
    DEEPSEEK_DEFAULT_BASE_URL,
    HUGGINGFACE_DEFAULT_BASE_URL,
    OLLAMA_DEFAULT_HOST,
    OPENAI_DEFAULT_BASE_URL,
    OPENROUTER_DEFAULT_BASE_URL,
    OPENROUTER_DEFAULT_REFERER,
    OPENROUTER_DEFAULT_TITLE,
)


# -------------------- Defaults --------------------

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "google": {},
    "openai": {"base_url": OPENAI_DEFAULT_BASE_URL},
    "huggingface": {"base_url": HUGGINGFACE_DEFAULT_BASE_URL},
    "deepseek": {"base_url": DEEPSEEK_DEFAULT_BASE_URL},
    "openrouter": {
        "base_url": OPENROUTER_DEFAULT_BASE_URL,
        "referer": OPENROUTER_DEFAULT_REFERER,
        "title": OPENROUTER_DEFAULT_TITLE,
    },
    "ollama": {"host": OLLAMA_DEFAULT_HOST},
}


ENV_FIELD_MAP = {
    "base_url": "BASE_URL",
    "host": "HOST",
    "referer": "REFERER",
    "title": "TITLE",
}

# Keys that must never come from configuration sources.
_SECRET_FIELDS = ("api_key", "credential")

_FILE_CACHE: Optional[Dict[str, Any]] = None


def _parse_config_text(text: str) -> Dict[str, Any]:
    """Parse config file text as JSON, falling back to YAML."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = yaml.safe_load(text) or {}
    return data if isinstance(data, dict) else {}


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("MULTICHAT_CONFIG_FILE")
    if not path:
        _FILE_CACHE = {}
        return _FILE_CACHE
    p = Path(path)
    if not p.exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    _FILE_CACHE = _parse_config_text(p.read_text(encoding="utf-8"))
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget the parsed config file so the next lookup re-reads it."""
    global _FILE_CACHE
    _FILE_CACHE = None


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val:
            out[field] = val
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    # 1. Defaults
    cfg |= DEFAULTS.get(name, {})

    # 2. External config file section
    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    # 3. Env overrides
    cfg |= _env_overrides(name)

    # 4. Explicit overrides arg
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    for secret in _SECRET_FIELDS:
        cfg.pop(secret, None)
    return cfg


__all__ = [
    "get_provider_config",
    "reset_config_cache",
    "DEFAULTS",
]
