"""
Custom exception classes for the prompt refiner.

This module defines the hierarchy of exceptions raised while validating tool
arguments, talking to the completion provider and running the MCP transport.
Everything raised inside a tool call is turned into an error envelope by the
dispatcher; only ``TransportStartupError`` terminates the process.
"""


class PromptRefinerError(Exception):
    """Base exception for all prompt refiner errors."""

    pass


class ConfigurationError(PromptRefinerError):
    """Raised when the process configuration holds an invalid value."""

    pass


class ToolError(PromptRefinerError):
    """Base exception for tool lookup and argument errors."""

    pass


class UnknownToolError(ToolError):
    """Raised when a requested tool is not found in the registry."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool called: {tool_name}")


class ToolRegistrationError(ToolError):
    """Raised when the tool registry is built with conflicting entries."""

    pass


class InvalidArgumentsError(ToolError):
    """Raised when a tool call payload does not match the declared input shape."""

    pass


class ProviderError(PromptRefinerError):
    """Base exception for failures around the remote completion provider."""

    pass


class MissingCredentialError(ProviderError):
    """Raised when no provider credential is configured. No network call is made."""

    pass


class ProviderInvocationError(ProviderError):
    """Raised when the provider call itself fails (network, auth, rate limit...).

    The original SDK exception is kept as ``__cause__``.
    """

    pass


class ProviderTimeoutError(ProviderError):
    """Raised when the provider does not answer within the configured timeout."""

    pass


class UnexpectedOutputShapeError(ProviderError):
    """Raised when the provider answered without usable text."""

    pass


class TransportStartupError(PromptRefinerError):
    """Raised when the stdio transport cannot be established or dies. Fatal."""

    pass
