"""Expose provider-agnostic message model types shared by provider implementations."""

from .models import BaseMessage, SystemMessage, UserMessage, CompiledMessagePair

__all__ = [
    "BaseMessage",
    "SystemMessage",
    "UserMessage",
    "CompiledMessagePair",
]
