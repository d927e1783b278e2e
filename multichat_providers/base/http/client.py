"""Shared HTTP client pool for providers.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances to avoid per-call allocations and reduce connection overhead
    across provider adapters. Timeouts derive exclusively from
    :func:`get_timeout_config`.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Credentials:
    - Pooled clients never carry auth headers. Adapters pass credentials as
      per-request headers so nothing secret outlives a single send.

Lifecycle & cleanup:
    - Clients are cached by a composite key of ``base_url`` and ``purpose``
      string. Purposes keep adapters from sharing a client (e.g. "openai.chat"
      vs "ollama.status").
    - All clients are closed at interpreter exit via ``atexit``. Libraries or
      tests may also call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

# Internal cache keyed by (base_url, purpose)
_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    The first request for a key creates a client configured with the HTTP
    timeout from :func:`get_timeout_config`. Subsequent requests reuse the
    same instance.

    Parameters:
        base_url: Optional API base URL to associate with the client. When
            provided, it is set on the client so relative requests can be used
            by callers. ``None`` groups clients under a shared key.
        purpose: A short string discriminating separate pools. Keep stable to
            maximize reuse.

    Returns:
        A reusable ``httpx.Client`` instance.

    Thread-safety:
        This function is safe for concurrent use; per-key creation is guarded
        by a re-entrant lock.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        timeout = get_timeout_config().http_timeout_seconds
        client = httpx.Client(base_url=base_url, timeout=timeout) if base_url else httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients.

    This is primarily useful in test teardown or application shutdown phases
    when immediate release of network resources is desired.
    """
    with _LOCK:
        for c in _CLIENTS.values():
            # nosec B110 - connection teardown failures at shutdown are non-actionable
            with contextlib.suppress(Exception):
                c.close()
        _CLIENTS.clear()


def _cleanup_at_exit() -> None:
    """atexit hook to ensure clients are closed on interpreter exit."""
    close_all_clients()


atexit.register(_cleanup_at_exit)

__all__ = ["get_httpx_client", "close_all_clients"]
