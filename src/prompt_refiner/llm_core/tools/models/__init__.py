"""Tool-related data models."""

from .models import ToolDescriptor, ToolCallRequest, TextBlock, ToolResponseEnvelope

__all__ = ["ToolDescriptor", "ToolCallRequest", "TextBlock", "ToolResponseEnvelope"]
