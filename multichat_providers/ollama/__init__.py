"""Ollama provider package (local daemon, no API key)."""

from .client import OllamaProvider
from .status import OllamaStatus, check_ollama_status

__all__ = ["OllamaProvider", "OllamaStatus", "check_ollama_status"]
