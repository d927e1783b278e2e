"""Ollama daemon status probe.

Sources:
    * Local Ollama HTTP API served at ``/api/tags`` via ``get_httpx_client``.

The settings UI uses this to show whether the daemon is reachable and which
models are installed locally. The probe never raises for daemon failures;
they are reported on :class:`OllamaStatus` instead.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from ..base.http import get_httpx_client
from ..base.logging import LogContext, get_logger, log_event
from .helpers import resolve_host

PROVIDER = "ollama"
_logger = get_logger("multichat.ollama.status")


@dataclass(frozen=True)
class OllamaStatus:
    """Outcome of one probe.

    Attributes:
        connected: The daemon answered ``/api/tags`` with a 2xx status.
        error: User-facing reason when not connected (``None`` otherwise).
        models: Installed model names, in daemon order.
    """

    connected: bool
    error: Optional[str] = None
    models: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"connected": self.connected, "error": self.error, "models": list(self.models)}


def _model_name(entry: Any) -> str:
    """Return the display name of one ``/api/tags`` entry.

    Accepts flexible key shapes across daemon versions (``name``/``model``).
    """
    if not isinstance(entry, dict):
        return str(entry)
    candidate = entry.get("name") or entry.get("model") or entry.get("id")
    return str(candidate) if candidate is not None else json.dumps(entry, ensure_ascii=False)


def check_ollama_status(host: Optional[str] = None) -> OllamaStatus:
    """Probe the daemon at ``host`` (or the configured host).

    Returns:
        ``OllamaStatus(connected=True, models=[...])`` on success. On a
        connection failure, error status or undecodable body returns
        ``connected=False`` with a message.
    """
    base_url = resolve_host(host)
    client = get_httpx_client(base_url, purpose="ollama.status")
    try:
        response = client.get("/api/tags")
    except httpx.TransportError as exc:
        status = OllamaStatus(
            connected=False,
            error="Could not connect to Ollama. Please make sure it is running.",
        )
        _log_status(status, failure_class=type(exc).__name__)
        return status
    if response.status_code >= 400:
        status = OllamaStatus(connected=False, error=f"Ollama returned HTTP {response.status_code}")
        _log_status(status, failure_class="HTTPStatus")
        return status
    try:
        payload = response.json()
    except ValueError:
        status = OllamaStatus(connected=False, error="Invalid response from Ollama")
        _log_status(status, failure_class="JSONDecodeError")
        return status
    raw_items = payload.get("models") if isinstance(payload, dict) else payload
    if raw_items is None:
        raw_items = []
    if not isinstance(raw_items, list):
        status = OllamaStatus(connected=False, error="Invalid response from Ollama")
        _log_status(status, failure_class="UnexpectedPayload")
        return status
    models = [_model_name(item) for item in raw_items]
    status = OllamaStatus(connected=True, models=models)
    _log_status(status)
    return status


def _log_status(status: OllamaStatus, *, failure_class: Optional[str] = None) -> None:
    log_event(
        _logger,
        "ollama.status",
        LogContext(provider=PROVIDER),
        connected=status.connected,
        model_count=len(status.models),
        failure_class=failure_class,
    )


__all__ = ["OllamaStatus", "check_ollama_status"]
