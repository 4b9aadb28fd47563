"""Expose the OpenAI-compatible completion provider."""

from .core import GenericOpenAI

__all__ = ["GenericOpenAI"]
