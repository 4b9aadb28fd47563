"""Prompt Refiner - an MCP tool server rewriting raw prompts into more effective ones."""

from .llm_core import (
    GenericLLM,
    CompletionResult,
    RefinerConfig,
    load_config,
    CompiledMessagePair,
    ToolDescriptor,
    ToolCallRequest,
    ToolResponseEnvelope,
    ToolRegistry,
)
from .llm_impl import GenericOpenAI, GenericGemini, build_llm
from .prompts import clean_prompt, compile_prompt
from .refiner import RefinePromptTool, REFINE_PROMPT_TOOL

__version__ = "1.2.0"

__all__ = [
    "GenericLLM",
    "CompletionResult",
    "RefinerConfig",
    "load_config",
    "CompiledMessagePair",
    "ToolDescriptor",
    "ToolCallRequest",
    "ToolResponseEnvelope",
    "ToolRegistry",
    "GenericOpenAI",
    "GenericGemini",
    "build_llm",
    "clean_prompt",
    "compile_prompt",
    "RefinePromptTool",
    "REFINE_PROMPT_TOOL",
]
