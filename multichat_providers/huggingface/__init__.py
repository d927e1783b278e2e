"""Hugging Face Inference API provider package."""

from .client import HuggingFaceProvider

__all__ = ["HuggingFaceProvider"]
