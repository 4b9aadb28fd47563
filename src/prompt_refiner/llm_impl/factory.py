"""Pick the completion provider implementation for a configuration."""

from typing import Any

from prompt_refiner.llm_core import GenericLLM, RefinerConfig, ConfigurationError, get_logger
from .gemini import GenericGemini
from .openai_api import GenericOpenAI

logger = get_logger(__name__)


def build_llm(config: RefinerConfig) -> GenericLLM[Any]:
    """Create the provider for ``config.provider``.

    No client is created here, so a missing credential surfaces on the first call only.

    Raises:
        ConfigurationError: If the provider is not supported.
    """
    if config.provider in ("anthropic", "openai"):
        llm: GenericLLM[Any] = GenericOpenAI(config)
    elif config.provider == "gemini":
        llm = GenericGemini(config)
    else:
        raise ConfigurationError(f"Unsupported provider '{config.provider}'.")

    logger.info(f"Using provider '{config.provider}' with model '{config.model}'.")
    return llm
