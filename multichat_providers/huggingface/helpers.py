"""Prompt and payload builders for the Hugging Face Inference API.

Text-generation models take one prompt string instead of a message list, so
the system prompt and user turn are flattened into a chat transcript that
ends with ``Assistant:`` for the model to continue.
"""

from __future__ import annotations

from typing import Any, Dict

from ..base.models import ChatRequest


def build_prompt(request: ChatRequest) -> str:
    """Return ``"{system}\\n\\nUser: {text}\\nAssistant:"`` (system part optional)."""
    turn = f"User: {request.text}\nAssistant:"
    if request.has_system_prompt:
        return f"{request.system_prompt}\n\n{turn}"
    return turn


def build_payload(request: ChatRequest) -> Dict[str, Any]:
    """Assemble the ``{inputs, parameters}`` body.

    ``return_full_text`` is disabled so the reply does not echo the prompt.
    """
    parameters: Dict[str, Any] = {"return_full_text": False}
    if request.temperature is not None:
        parameters["temperature"] = request.temperature
    if request.max_tokens is not None:
        parameters["max_new_tokens"] = request.max_tokens
    return {"inputs": build_prompt(request), "parameters": parameters}


__all__ = ["build_payload", "build_prompt"]
