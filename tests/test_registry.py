import pytest
from typing import Any

from prompt_refiner.llm_core import ToolDescriptor, ToolRegistry, ToolRegistrationError, UnknownToolError
from prompt_refiner.refiner import REFINE_PROMPT_TOOL, RefinePromptTool


class EchoTool:
    descriptor = ToolDescriptor(name="echo", description="Echo the text back.", input_schema={"type": "object"})

    async def __call__(self, arguments: Any) -> str:
        return str(arguments["text"])


def test_lookup_by_exact_name(stub_llm: Any) -> None:
    tool = RefinePromptTool(stub_llm)
    registry = ToolRegistry([tool])

    assert registry.get("refine_prompt") is tool
    assert "refine_prompt" in registry
    assert len(registry) == 1
    assert list(registry) == ["refine_prompt"]


def test_unknown_name_raises(stub_llm: Any) -> None:
    registry = ToolRegistry([RefinePromptTool(stub_llm)])

    with pytest.raises(UnknownToolError) as exc_info:
        registry.get("Refine_Prompt")

    assert exc_info.value.tool_name == "Refine_Prompt"
    assert "Refine_Prompt" in str(exc_info.value)


def test_duplicate_names_are_rejected(stub_llm: Any) -> None:
    with pytest.raises(ToolRegistrationError, match="already registered"):
        ToolRegistry([RefinePromptTool(stub_llm), RefinePromptTool(stub_llm)])


def test_registry_is_read_only(stub_llm: Any) -> None:
    registry = ToolRegistry([RefinePromptTool(stub_llm)])

    with pytest.raises(TypeError):
        registry.tools["echo"] = EchoTool()  # type: ignore[index]


def test_descriptors_keep_registration_order(stub_llm: Any) -> None:
    registry = ToolRegistry([RefinePromptTool(stub_llm), EchoTool()])
    assert [d.name for d in registry.descriptors] == ["refine_prompt", "echo"]
    assert registry.descriptors[0] is REFINE_PROMPT_TOOL
