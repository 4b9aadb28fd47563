from .models import ToolDescriptor, ToolCallRequest, TextBlock, ToolResponseEnvelope
from .registry import ToolHandler, ToolRegistry
from .schema import ArgumentValidator, RefinePromptArgs

__all__ = [
    "ToolDescriptor",
    "ToolCallRequest",
    "TextBlock",
    "ToolResponseEnvelope",
    "ToolHandler",
    "ToolRegistry",
    "ArgumentValidator",
    "RefinePromptArgs",
]
