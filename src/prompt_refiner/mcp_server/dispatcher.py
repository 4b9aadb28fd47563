"""Route tool calls to their handlers and turn every outcome into a response envelope."""

from typing import List

from prompt_refiner.llm_core import (
    ToolCallRequest,
    ToolDescriptor,
    ToolRegistry,
    ToolResponseEnvelope,
    UnknownToolError,
    get_logger,
)

logger = get_logger(__name__)


class ToolDispatcher:
    """Looks tools up by exact name and runs them.

    ``dispatch`` never raises: unknown tools and failures at any stage come back as
    error envelopes so a bad call cannot take the server down.
    """

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    def list_tools(self) -> List[ToolDescriptor]:
        """Return the descriptors of all registered tools."""
        logger.debug("list_tools called")
        return self.registry.descriptors

    async def dispatch(self, request: ToolCallRequest) -> ToolResponseEnvelope:
        """Run one tool call.

        Args:
            request: Tool name plus its untyped arguments.

        Returns:
            A success envelope carrying the tool output, or an error envelope.
        """
        logger.info(f"call_tool handler called for tool: {request.name}")

        try:
            handler = self.registry.get(request.name)
        except UnknownToolError:
            logger.warning(f"Attempted to call unknown tool: {request.name}")
            return ToolResponseEnvelope.failure(f"Error: Unknown tool called: {request.name}")

        try:
            text = await handler(request.arguments)
        except Exception as e:
            logger.error(f"Error processing tool call for '{request.name}': {e}", exc_info=True)
            return ToolResponseEnvelope.failure(f"Error executing tool '{request.name}': {e}")

        return ToolResponseEnvelope.success(text)
