import asyncio
from typing import Any, List, Tuple
from unittest.mock import AsyncMock, MagicMock

import pytest
from openai import AsyncOpenAI
from openai.types.chat import ChatCompletion, ChatCompletionMessage
from openai.types.chat.chat_completion import Choice

from prompt_refiner.llm_core import GenericLLM, RefinerConfig
from prompt_refiner.llm_core.messages import BaseMessage


class StubLLM(GenericLLM[None]):
    """Provider double recording the messages it receives and answering with ``output``."""

    def __init__(self, config: RefinerConfig, output: Any = "Rewritten prompt", delay: float = 0.0):
        super().__init__(config)
        self.output = output
        self.delay = delay
        self.calls: List[List[BaseMessage]] = []

    async def _complete_impl(self, messages: List[BaseMessage]) -> Tuple[Any, None]:
        self.calls.append(messages)
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.output, None


@pytest.fixture
def config() -> RefinerConfig:
    return RefinerConfig(provider="anthropic", api_key="test-key")


@pytest.fixture
def config_without_key() -> RefinerConfig:
    return RefinerConfig(provider="anthropic")


@pytest.fixture
def stub_llm(config: RefinerConfig) -> StubLLM:
    return StubLLM(config)


@pytest.fixture
def stub_llm_without_key(config_without_key: RefinerConfig) -> StubLLM:
    return StubLLM(config_without_key)


@pytest.fixture
def mock_openai_client() -> Any:
    client = MagicMock(spec=AsyncOpenAI)
    client.chat = MagicMock()
    client.chat.completions = MagicMock()
    client.chat.completions.create = AsyncMock()
    return client


@pytest.fixture
def make_completion() -> Any:
    """Factory building a mocked ChatCompletion whose first choice carries ``content``."""

    def _make(content: Any) -> Any:
        mock_message = MagicMock(spec=ChatCompletionMessage)
        mock_message.content = content
        mock_message.tool_calls = None

        mock_choice = MagicMock(spec=Choice)
        mock_choice.message = mock_message
        mock_choice.finish_reason = "stop"

        mock_response = MagicMock(spec=ChatCompletion)
        mock_response.choices = [mock_choice]
        mock_response.usage = None
        return mock_response

    return _make


@pytest.fixture
def stub_llm_factory() -> Any:
    return StubLLM
