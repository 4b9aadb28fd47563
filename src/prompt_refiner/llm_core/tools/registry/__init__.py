from .base import ToolHandler, ToolRegistry

__all__ = ["ToolHandler", "ToolRegistry"]
