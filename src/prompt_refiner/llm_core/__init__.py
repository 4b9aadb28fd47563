"""Public exports for the core abstractions and utilities."""

from .base import GenericLLM, CompletionResult
from .config import RefinerConfig, load_config
from .exceptions import (
    PromptRefinerError,
    ConfigurationError,
    ToolError,
    UnknownToolError,
    ToolRegistrationError,
    InvalidArgumentsError,
    ProviderError,
    MissingCredentialError,
    ProviderInvocationError,
    ProviderTimeoutError,
    UnexpectedOutputShapeError,
    TransportStartupError,
)
from .logger import get_logger, setup_logging
from .messages import BaseMessage, SystemMessage, UserMessage, CompiledMessagePair
from .tools import (
    ToolDescriptor,
    ToolCallRequest,
    TextBlock,
    ToolResponseEnvelope,
    ToolHandler,
    ToolRegistry,
    ArgumentValidator,
    RefinePromptArgs,
)

__all__ = [
    "GenericLLM",
    "CompletionResult",
    "RefinerConfig",
    "load_config",
    "PromptRefinerError",
    "ConfigurationError",
    "ToolError",
    "UnknownToolError",
    "ToolRegistrationError",
    "InvalidArgumentsError",
    "ProviderError",
    "MissingCredentialError",
    "ProviderInvocationError",
    "ProviderTimeoutError",
    "UnexpectedOutputShapeError",
    "TransportStartupError",
    "get_logger",
    "setup_logging",
    "BaseMessage",
    "SystemMessage",
    "UserMessage",
    "CompiledMessagePair",
    "ToolDescriptor",
    "ToolCallRequest",
    "TextBlock",
    "ToolResponseEnvelope",
    "ToolHandler",
    "ToolRegistry",
    "ArgumentValidator",
    "RefinePromptArgs",
]
