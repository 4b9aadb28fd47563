"""Immutable tool registry mapping tool names to their handlers."""

from types import MappingProxyType
from typing import Any, Iterable, Iterator, List, Mapping, Protocol, runtime_checkable

from ..models import ToolDescriptor
from ...exceptions import ToolRegistrationError, UnknownToolError
from ...logger import get_logger

logger = get_logger(__name__)


@runtime_checkable
class ToolHandler(Protocol):
    """Anything that can serve a tool call: a descriptor plus an async callable returning text."""

    descriptor: ToolDescriptor

    async def __call__(self, arguments: Any) -> str: ...


class ToolRegistry:
    """
    Read-only mapping of tool names to handlers.

    Built once at startup and passed by reference to the dispatcher. There is no
    ``register`` after construction.
    """

    def __init__(self, handlers: Iterable[ToolHandler]) -> None:
        """Build the registry.

        Args:
            handlers: Tool handlers to expose, each with a unique descriptor name.

        Raises:
            ToolRegistrationError: If two handlers share a name.
        """
        tools: dict[str, ToolHandler] = {}
        for handler in handlers:
            name = handler.descriptor.name
            if name in tools:
                msg = f"Tool '{name}' is already registered."
                logger.error(msg)
                raise ToolRegistrationError(msg)
            tools[name] = handler
            logger.info(f"Successfully registered tool: '{name}'")
        self._tools: Mapping[str, ToolHandler] = MappingProxyType(tools)

    @property
    def tools(self) -> Mapping[str, ToolHandler]:
        return self._tools

    @property
    def descriptors(self) -> List[ToolDescriptor]:
        """Descriptors of all registered tools, in registration order."""
        return [handler.descriptor for handler in self._tools.values()]

    def get(self, name: str) -> ToolHandler:
        """Look up a handler by exact name.

        Raises:
            UnknownToolError: If no tool with that name is registered.
        """
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[str]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)
