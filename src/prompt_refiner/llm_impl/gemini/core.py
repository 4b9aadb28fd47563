import httpx
from google.genai import Client, errors, types
from typing import List, Tuple, Optional, Any

from google.genai.client import AsyncClient
from google.genai.types import GenerateContentResponse
from prompt_refiner.llm_core import GenericLLM, RefinerConfig, ProviderInvocationError, get_logger
from prompt_refiner.llm_core.messages.models import BaseMessage, SystemMessage

logger = get_logger(__name__)


class GenericGemini(GenericLLM[GenerateContentResponse]):
    """
    Completion provider backed by Google's Gemini models.

    Gemini has no system role in the conversation, so system messages go into
    ``GenerateContentConfig.system_instruction`` and the rest is sent as user contents.
    """

    def __init__(self, config: RefinerConfig, aclient: Optional[AsyncClient] = None):
        """
        Initializes the GenericGemini provider.

        Args:
            config: Provider configuration (credential, model, temperature...).
            aclient: Optional pre-built async client. When omitted, one is created on the first call.
        """
        super().__init__(config)
        self._client: Optional[AsyncClient] = aclient
        logger.info(f"Initialized GenericGemini with model='{config.model}', temp={config.temperature}")

    @property
    def client(self) -> AsyncClient:
        if self._client is None:
            http_options = types.HttpOptions(base_url=self.config.base_url) if self.config.base_url else None
            self._client = Client(api_key=self.config.api_key, http_options=http_options).aio
        return self._client

    async def _complete_impl(self, messages: List[BaseMessage]) -> Tuple[Any, GenerateContentResponse]:
        system_instruction, contents = self._split_messages(messages)
        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=self.temperature,
            max_output_tokens=self.max_tokens,
        )

        logger.debug(f"Asking Gemini (model={self.model}): {contents[0][:50] if contents else ''}...")
        try:
            response = await self.client.models.generate_content(
                model=self.model,
                contents=contents,  # type: ignore[arg-type]
                config=config,
            )
        except (errors.APIError, httpx.HTTPError) as e:
            logger.error(f"Error sending message to Gemini: {e}", exc_info=True)
            raise ProviderInvocationError(f"Completion request failed: {e}") from e

        return self._extract_text(response), response

    @staticmethod
    def _split_messages(messages: List[BaseMessage]) -> Tuple[Optional[str], List[str]]:
        """
        Separates system instructions from the user contents.

        Args:
            messages: List of BaseMessage objects.

        Returns:
            The joined system instruction (or None) and the list of user contents.
        """
        system_parts = [msg.content for msg in messages if isinstance(msg, SystemMessage)]
        contents = [msg.content for msg in messages if not isinstance(msg, SystemMessage)]
        return ("\n\n".join(system_parts) if system_parts else None), contents

    @staticmethod
    def _extract_text(response: GenerateContentResponse) -> Any:
        """Joins the text parts of the first candidate, None if there are none."""
        if not response or not response.parts:
            logger.warning("Gemini response has no content parts.")
            return None
        texts = [p.text for p in response.parts if p.text]
        return "".join(texts) if texts else None
