"""MCP server wiring for the refine_prompt tool."""

from .dispatcher import ToolDispatcher
from .server import RefinePromptServer, to_mcp_tool, to_call_tool_result, main

__all__ = ["ToolDispatcher", "RefinePromptServer", "to_mcp_tool", "to_call_tool_result", "main"]
