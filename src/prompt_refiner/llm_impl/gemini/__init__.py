"""Gemini completion provider."""

from .core import GenericGemini

__all__ = ["GenericGemini"]
