"""Transport timeout configuration for providers.

This module centralizes the single timeout value used across provider
adapters: the per-request HTTP timeout handed to pooled ``httpx`` clients and
SDK clients. There is no per-call deadline beyond it; a send either returns,
fails, or hits this transport timeout.

Key Components
--------------
TimeoutConfig
    Frozen dataclass capturing the normalized timeout value.

get_timeout_config()
    Returns a process-cached configuration. The environment is consulted on
    first use and again whenever the override variable changes, so tests can
    adjust it at runtime. Supported environment variable (optional):
        MULTICHAT_HTTP_TIMEOUT_SECONDS

Failure Modes
-------------
Malformed or non-positive overrides fall back to the default silently.
"""
from __future__ import annotations

from dataclasses import dataclass
import os

from ..config.defaults import DEFAULT_HTTP_TIMEOUT_SECONDS

_ENV_VAR = "MULTICHAT_HTTP_TIMEOUT_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Baseline HTTP request timeout for provider calls.
    """

    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse an environment variable as a positive float with a fallback default."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - intentional, documented module cache
    cur_guard = os.getenv(_ENV_VAR, "")
    if _CACHED is not None and _ENV_GUARD == cur_guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float(_ENV_VAR, DEFAULT_HTTP_TIMEOUT_SECONDS)
    )
    _ENV_GUARD = cur_guard
    return _CACHED


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
]
