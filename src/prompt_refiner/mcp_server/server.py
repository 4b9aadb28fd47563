"""Expose the refine_prompt tool over the MCP stdio transport."""

import asyncio
import copy
import sys
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from prompt_refiner.llm_core import (
    ConfigurationError,
    GenericLLM,
    RefinerConfig,
    ToolCallRequest,
    ToolDescriptor,
    ToolRegistry,
    ToolResponseEnvelope,
    TransportStartupError,
    get_logger,
    load_config,
    setup_logging,
)
from prompt_refiner.llm_impl import build_llm
from prompt_refiner.refiner import RefinePromptTool
from .dispatcher import ToolDispatcher

logger = get_logger(__name__)

__all__ = ["RefinePromptServer", "to_mcp_tool", "to_call_tool_result", "main"]

SERVER_NAME = "refine-prompt"
SERVER_VERSION = "1.2.0"


def to_mcp_tool(descriptor: ToolDescriptor) -> Tool:
    """Convert a tool descriptor into the MCP ``Tool`` shape."""
    return Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=copy.deepcopy(descriptor.input_schema),
    )


def to_call_tool_result(envelope: ToolResponseEnvelope) -> CallToolResult:
    """Convert a response envelope into the MCP ``CallToolResult`` shape."""
    return CallToolResult(
        content=[TextContent(type="text", text=block.text) for block in envelope.content],
        isError=envelope.is_error,
    )


class RefinePromptServer:
    """MCP server with a single ``refine_prompt`` tool."""

    def __init__(self, config: RefinerConfig, llm: Optional[GenericLLM[Any]] = None):
        """Wire provider, tool registry and dispatcher into an MCP server.

        Args:
            config: Provider configuration.
            llm: Optional provider instance; built from ``config`` when omitted.
        """
        self.config = config
        self.llm = llm if llm is not None else build_llm(config)
        self.registry = ToolRegistry([RefinePromptTool(self.llm)])
        self.dispatcher = ToolDispatcher(self.registry)
        self.server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

        self._register_handlers()
        logger.info(f"{SERVER_NAME} server initialized (version {SERVER_VERSION}, provider={config.provider}).")

    def _register_handlers(self) -> None:
        """Register MCP protocol handlers."""

        @self.server.list_tools()
        async def list_tools() -> List[Tool]:
            logger.info("list_tools handler called.")
            return [to_mcp_tool(descriptor) for descriptor in self.dispatcher.list_tools()]

        # Arguments are validated by the tool itself so that bad payloads get our error envelope.
        @self.server.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: Dict[str, Any]) -> CallToolResult:
            envelope = await self.dispatcher.dispatch(ToolCallRequest(name=name, arguments=arguments))
            return to_call_tool_result(envelope)

    async def run(self) -> None:
        """Serve requests over stdio until the host closes the stream.

        Raises:
            TransportStartupError: If the stdio transport cannot be set up, or fails while
                serving. Both end the process.
        """
        logger.info(f"Starting {SERVER_NAME} server (stdio transport)")
        try:
            async with stdio_server() as (read_stream, write_stream):
                logger.info("Refine Prompt server running and connected via stdio.")
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.server.create_initialization_options(),
                )
        except Exception as e:
            raise TransportStartupError(f"stdio transport failed (startup or while serving): {e}") from e
        logger.info("stdio transport closed, shutting down.")


def main() -> None:
    """Entry point for the refine-prompt MCP server."""
    try:
        config = load_config()
    except ConfigurationError as e:
        setup_logging()
        logger.critical(f"Invalid configuration: {e}")
        sys.exit(1)

    setup_logging(config.log_level)
    server = RefinePromptServer(config)

    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down.")
    except TransportStartupError as e:
        logger.critical(f"Fatal error starting or running the MCP server: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
