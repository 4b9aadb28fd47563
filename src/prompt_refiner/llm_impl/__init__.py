"""Collect concrete completion provider implementations."""

from .gemini import GenericGemini
from .openai_api import GenericOpenAI
from .factory import build_llm

__all__ = [
    "GenericGemini",
    "GenericOpenAI",
    "build_llm",
]
