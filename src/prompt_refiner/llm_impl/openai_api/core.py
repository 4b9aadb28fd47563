from openai import AsyncOpenAI, OpenAIError
from openai.types.chat import ChatCompletion
from typing import List, Tuple, Optional, Any, Dict, Iterable, cast
import logging
from prompt_refiner.llm_core import GenericLLM, RefinerConfig, ProviderInvocationError
from prompt_refiner.llm_core.messages.models import BaseMessage, SystemMessage, UserMessage

logger = logging.getLogger(__name__)


class GenericOpenAI(GenericLLM[ChatCompletion]):
    """
    Completion provider backed by the OpenAI chat completions API.

    Also serves Anthropic models through Anthropic's OpenAI-compatible endpoint,
    selected via ``config.base_url``.
    """

    def __init__(self, config: RefinerConfig, client: Optional[AsyncOpenAI] = None):
        """
        Initializes the GenericOpenAI provider.

        Args:
            config: Provider configuration (credential, model, temperature...).
            client: Optional pre-built client. When omitted, one is created on the first call,
                after the credential check passed.
        """
        super().__init__(config)
        self._client: Optional[AsyncOpenAI] = client

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            logger.debug(f"Creating AsyncOpenAI client (base_url={self.config.base_url or 'default'}).")
            self._client = AsyncOpenAI(api_key=self.config.api_key, base_url=self.config.base_url, max_retries=0)
        return self._client

    async def _complete_impl(self, messages: List[BaseMessage]) -> Tuple[Any, ChatCompletion]:
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=cast(Iterable[Any], self._convert_messages(messages)),
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except OpenAIError as e:
            logger.error(f"Error invoking OpenAI-compatible completion (model={self.model}): {e}", exc_info=True)
            raise ProviderInvocationError(f"Completion request failed: {e}") from e

        return self._extract_text(response), response

    @staticmethod
    def _convert_messages(messages: List[BaseMessage]) -> List[Dict[str, Any]]:
        """
        Converts generic messages to OpenAI message dictionaries.

        Args:
            messages: List of BaseMessage objects.

        Returns:
            List of OpenAI message dictionaries.
        """
        openai_messages = []
        for msg in messages:
            if isinstance(msg, SystemMessage):
                openai_messages.append({"role": "system", "content": msg.content})
            elif isinstance(msg, UserMessage):
                openai_messages.append({"role": "user", "content": msg.content})
            else:
                openai_messages.append({"role": msg.author, "content": msg.content})
        return openai_messages

    @staticmethod
    def _extract_text(response: ChatCompletion) -> Any:
        """Returns the content of the first choice, or None if the response has none."""
        if not getattr(response, "choices", None):
            logger.warning("Completion response has no choices.")
            return None
        return response.choices[0].message.content
