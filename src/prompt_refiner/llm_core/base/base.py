"""Core abstractions for completion provider implementations."""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Tuple, TypeVar

from pydantic import BaseModel

from ..config import RefinerConfig
from ..exceptions import MissingCredentialError, ProviderTimeoutError, UnexpectedOutputShapeError
from ..logger import get_logger
from ..messages import BaseMessage, CompiledMessagePair

logger = get_logger(__name__)


ProviderResT = TypeVar("ProviderResT")


class CompletionResult(BaseModel, Generic[ProviderResT]):
    """Normalized completion output returned by provider implementations.

    Attributes:
        text: Final text returned by the provider, stripped of surrounding whitespace. Never empty.
        model: Model identifier the request was sent to.
        raw: Provider-specific response payload for advanced use cases.
    """

    text: str
    model: str
    raw: Optional[ProviderResT] = None


class GenericLLM(ABC, Generic[ProviderResT]):
    """Abstract base class for completion providers.

    A provider makes exactly one attempt per call. The credential is checked before
    anything touches the network and the whole call is bounded by ``config.timeout``.
    """

    def __init__(self, config: RefinerConfig):
        self.config = config

    @property
    def model(self) -> str:
        return self.config.model

    @property
    def temperature(self) -> float:
        return self.config.temperature

    @property
    def max_tokens(self) -> int:
        return self.config.max_tokens

    async def complete(self, messages: CompiledMessagePair) -> CompletionResult[ProviderResT]:
        """
        Sends the compiled system/user pair to the provider and returns the final text.

        Args:
            messages: The compiled message pair.

        Returns:
            The completion with stripped, non-empty text.

        Raises:
            MissingCredentialError: If no credential is configured. No request is sent.
            ProviderTimeoutError: If the provider did not answer within ``config.timeout`` seconds.
            ProviderInvocationError: If the provider call failed.
            UnexpectedOutputShapeError: If the provider returned no usable text.
        """
        self._require_credential()

        logger.debug(f"Sending completion request (provider={self.config.provider}, model={self.model}).")
        try:
            output, raw = await asyncio.wait_for(
                self._complete_impl(messages.as_messages()),
                timeout=self.config.timeout,
            )
        except asyncio.TimeoutError as exc:
            msg = f"Provider '{self.config.provider}' did not respond within {self.config.timeout} seconds."
            logger.error(msg)
            raise ProviderTimeoutError(msg) from exc

        text = self._normalize_output(output)
        logger.debug(f"Completion received ({len(text)} chars).")
        return CompletionResult(text=text, model=self.model, raw=raw)

    def _require_credential(self) -> None:
        if not self.config.has_credential:
            msg = f"{self.config.credential_env} environment variable is not set."
            logger.error(msg)
            raise MissingCredentialError(msg)

    @staticmethod
    def _normalize_output(output: Any) -> str:
        if not isinstance(output, str):
            msg = f"Failed to get string output from the language model (got {type(output).__name__})."
            logger.error(msg)
            raise UnexpectedOutputShapeError(msg)

        text = output.strip()
        if not text:
            msg = "Failed to get string output from the language model (empty response)."
            logger.error(msg)
            raise UnexpectedOutputShapeError(msg)
        return text

    @abstractmethod
    async def _complete_impl(self, messages: List[BaseMessage]) -> Tuple[Any, ProviderResT]:
        """Run the provider call.

        Returns:
            The extracted output (expected to be a str) and the raw provider response.
        """
        pass
