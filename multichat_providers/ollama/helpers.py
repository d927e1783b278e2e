"""Ollama helpers module.

Purpose:
- Side-effect-free utilities for the Ollama provider: host resolution and
  ``/api/chat`` payload construction, shared by the chat adapter and the
  status probe.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..base.models import ChatRequest
from ..base.utils.messages import build_messages
from ..config import get_provider_config
from ..config.defaults import OLLAMA_DEFAULT_HOST


def _coerce_non_empty_str(candidate: Any, fallback: str) -> str:
    """Return a sanitized string value derived from ``candidate``.

    Parameters
    ----------
    candidate:
        Arbitrary override sourced from configuration layers (defaults,
        config file, environment variables, or explicit overrides).
    fallback:
        Default used when the candidate is missing or empty.
    """

    if isinstance(candidate, str):
        return candidate.strip() or fallback
    if candidate is None:
        return fallback
    return str(candidate).strip() or fallback


def resolve_host(host: Optional[str] = None) -> str:
    """Return the Ollama daemon base URL.

    Resolution order: explicit ``host``, then the layered ``ollama`` config
    (config file, ``OLLAMA_HOST``), then ``http://localhost:11434``.
    """
    cfg = get_provider_config("ollama", overrides={"host": host})
    return _coerce_non_empty_str(cfg.get("host"), OLLAMA_DEFAULT_HOST).rstrip("/")


def build_payload(model: str, request: ChatRequest) -> Dict[str, Any]:
    """Build the non-streaming ``/api/chat`` body.

    Ollama takes sampling options under ``options``; only the temperature is
    forwarded.
    """
    payload: Dict[str, Any] = {
        "model": model,
        "messages": build_messages(request),
        "stream": False,
    }
    if request.temperature is not None:
        payload["options"] = {"temperature": request.temperature}
    return payload


__all__ = ["build_payload", "resolve_host"]
