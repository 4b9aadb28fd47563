"""The ``refine_prompt`` tool: validate the arguments, compile the instruction pair, ask the model."""

from typing import Any

from prompt_refiner.llm_core import GenericLLM, ToolDescriptor, ArgumentValidator, RefinePromptArgs, get_logger
from prompt_refiner.prompts import clean_prompt, compile_prompt

logger = get_logger(__name__)

REFINE_PROMPT_TOOL_NAME = "refine_prompt"

REFINE_PROMPT_TOOL = ToolDescriptor(
    name=REFINE_PROMPT_TOOL_NAME,
    description=(
        "This tool MUST be used whenever a user asks to refine, rewrite, improve, enhance, or optimize a prompt. "
        "It transforms raw prompts into more effective versions that are clearer, more detailed, and better "
        "structured to improve results from Large Language Models (LLMs). When users mention 'refine prompt' "
        "or similar phrases, use this tool."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "prompt": {
                "type": "string",
                "description": "The raw user prompt that needs rewriting.",
            },
            "language": {
                "type": "string",
                "description": (
                    "Optional: The primary programming language if the prompt is code-related "
                    "(e.g., typescript, python). Helps tailor coding prompts."
                ),
            },
        },
        "required": ["prompt"],
        "title": "refine_prompt_Arguments",
    },
)

_PREVIEW_CHARS = 100


class RefinePromptTool:
    """Tool handler rewriting a raw prompt into a more effective one."""

    descriptor = REFINE_PROMPT_TOOL

    def __init__(self, llm: GenericLLM[Any]):
        """
        Args:
            llm: The completion provider used for the rewrite.
        """
        self.llm = llm
        self.validator = ArgumentValidator(
            RefinePromptArgs,
            tool_name=REFINE_PROMPT_TOOL_NAME,
            expected_shape="{ prompt: string, language?: string }",
        )

    async def __call__(self, arguments: Any) -> str:
        """Run validate -> compile -> invoke for one call.

        Args:
            arguments: Untyped argument payload.

        Returns:
            The rewritten prompt.

        Raises:
            InvalidArgumentsError: If the payload does not match the input schema.
            ProviderError: If the completion provider fails.
        """
        args = self.validator.validate(arguments)
        cleaned = clean_prompt(args.prompt)

        if args.language:
            logger.info(f"Received prompt to rewrite (Language hint: '{args.language}'): \"{cleaned[:_PREVIEW_CHARS]}...\"")
        else:
            logger.info(f"Received prompt to rewrite: \"{cleaned[:_PREVIEW_CHARS]}...\"")

        messages = compile_prompt(cleaned, args.language)
        result = await self.llm.complete(messages)

        logger.info(f"Rewritten prompt: \"{result.text[:_PREVIEW_CHARS]}...\"")
        return result.text
