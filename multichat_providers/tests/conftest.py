"""Pytest configuration for the multichat test suite.

Every test starts from a clean configuration: no config file, no endpoint
overrides in the environment, no pooled HTTP clients and a fresh default
dispatcher. Nothing here reaches the network.
"""

from __future__ import annotations

import json
import logging
from typing import Iterator, List

import pytest

_ENV_VARS = (
    "MULTICHAT_CONFIG_FILE",
    "MULTICHAT_HTTP_TIMEOUT_SECONDS",
    "MULTICHAT_LOG_LEVEL",
    "OPENAI_BASE_URL",
    "DEEPSEEK_BASE_URL",
    "HUGGINGFACE_BASE_URL",
    "OPENROUTER_BASE_URL",
    "OPENROUTER_REFERER",
    "OPENROUTER_TITLE",
    "OLLAMA_HOST",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate each test from host configuration and shared client state."""
    from multichat_providers import dispatcher
    from multichat_providers.base.http import close_all_clients
    from multichat_providers.config import reset_config_cache

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    close_all_clients()
    monkeypatch.setattr(dispatcher, "_default", None)
    yield
    reset_config_cache()
    close_all_clients()


class _ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def events(self) -> List[dict]:
        """Return decoded JSON payloads of captured records."""
        out = []
        for record in self.records:
            try:
                out.append(json.loads(record.getMessage()))
            except ValueError:
                continue
        return out

    def text(self) -> str:
        return "\n".join(r.getMessage() for r in self.records)


@pytest.fixture()
def log_records() -> Iterator[_ListHandler]:
    """Attach a capturing handler to the shared ``multichat`` logger.

    The shared logger does not propagate to the root logger, so pytest's
    ``caplog`` does not see its records.
    """
    from multichat_providers.base.logging import get_logger

    logger = get_logger("multichat")
    handler = _ListHandler()
    logger.addHandler(handler)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
