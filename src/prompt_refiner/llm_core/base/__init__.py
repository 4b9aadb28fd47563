"""Re-export the base provider interface and the shared completion result model."""

from .base import GenericLLM, CompletionResult

__all__ = [
    "GenericLLM",
    "CompletionResult",
]
