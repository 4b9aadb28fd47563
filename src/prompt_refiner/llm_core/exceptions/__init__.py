"""Export the exception hierarchy used across validation, provider and transport paths."""

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

__all__ = [
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
]
