import asyncio
import sys

from prompt_refiner import RefinePromptTool, build_llm, load_config
from prompt_refiner.llm_core import PromptRefinerError


async def main() -> None:
    """
    Refine a single prompt from the command line without going through MCP.

    Usage: python docs/examples/refine_once.py "write code to sort a list" [language]
    """
    if len(sys.argv) < 2:
        print("Usage: refine_once.py <prompt> [language]")
        return

    arguments = {"prompt": sys.argv[1]}
    if len(sys.argv) > 2:
        arguments["language"] = sys.argv[2]

    config = load_config()
    tool = RefinePromptTool(build_llm(config))
    print(f"Using provider '{config.provider}' ({config.model}).")

    try:
        print(await tool(arguments))
    except PromptRefinerError as e:
        print(f"An error occurred: {e}")


if __name__ == "__main__":
    asyncio.run(main())
