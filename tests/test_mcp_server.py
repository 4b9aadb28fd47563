import pytest
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch
from mcp import types
from typing import Any

from prompt_refiner.llm_core import RefinerConfig, ToolResponseEnvelope, TransportStartupError
from prompt_refiner.llm_impl import GenericOpenAI
from prompt_refiner.mcp_server import RefinePromptServer, to_call_tool_result, to_mcp_tool
from prompt_refiner.refiner import REFINE_PROMPT_TOOL


def test_descriptor_to_mcp_tool() -> None:
    tool = to_mcp_tool(REFINE_PROMPT_TOOL)

    assert isinstance(tool, types.Tool)
    assert tool.name == "refine_prompt"
    assert tool.description == REFINE_PROMPT_TOOL.description
    assert tool.inputSchema["required"] == ["prompt"]
    assert tool.inputSchema["title"] == "refine_prompt_Arguments"
    assert "language" not in tool.inputSchema["required"]


def test_success_envelope_to_result() -> None:
    result = to_call_tool_result(ToolResponseEnvelope.success("Better prompt"))

    assert isinstance(result, types.CallToolResult)
    assert result.isError is False
    assert len(result.content) == 1
    assert isinstance(result.content[0], types.TextContent)
    assert result.content[0].text == "Better prompt"


def test_error_envelope_to_result() -> None:
    result = to_call_tool_result(ToolResponseEnvelope.failure("Error: Unknown tool called: nope"))

    assert result.isError is True
    assert result.content[0].text == "Error: Unknown tool called: nope"


def test_server_builds_provider_from_config(config: RefinerConfig) -> None:
    server = RefinePromptServer(config)

    assert isinstance(server.llm, GenericOpenAI)
    assert list(server.registry) == ["refine_prompt"]
    assert server.server.name == "refine-prompt"


@pytest.mark.asyncio
async def test_list_tools_request(stub_llm: Any, config: RefinerConfig) -> None:
    server = RefinePromptServer(config, llm=stub_llm)
    handler = server.server.request_handlers[types.ListToolsRequest]

    response = await handler(types.ListToolsRequest(method="tools/list"))

    assert isinstance(response.root, types.ListToolsResult)
    assert [tool.name for tool in response.root.tools] == ["refine_prompt"]


@pytest.mark.asyncio
async def test_transport_failure_is_wrapped(stub_llm: Any, config: RefinerConfig) -> None:
    server = RefinePromptServer(config, llm=stub_llm)

    with patch("prompt_refiner.mcp_server.server.stdio_server", side_effect=OSError("stdin closed")):
        with pytest.raises(TransportStartupError, match="stdin closed"):
            await server.run()


def test_main_exits_non_zero_on_transport_failure() -> None:
    from prompt_refiner.mcp_server import server as server_module

    with (
        patch.object(server_module, "load_config", return_value=RefinerConfig(api_key="k")),
        patch.object(server_module, "setup_logging"),
        patch.object(server_module.RefinePromptServer, "run", side_effect=TransportStartupError("no stdio")),
    ):
        with pytest.raises(SystemExit) as exc_info:
            server_module.main()

    assert exc_info.value.code == 1


def test_mcp_tool_does_not_share_schema_with_descriptor() -> None:
    tool = to_mcp_tool(REFINE_PROMPT_TOOL)
    tool.inputSchema["properties"]["prompt"]["type"] = "integer"
    tool.inputSchema["required"].append("language")

    assert REFINE_PROMPT_TOOL.input_schema["properties"]["prompt"]["type"] == "string"
    assert REFINE_PROMPT_TOOL.input_schema["required"] == ["prompt"]


def _call_request(name: str, arguments: Any = None) -> types.CallToolRequest:
    return types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )


@pytest.mark.asyncio
async def test_call_tool_request_success(stub_llm: Any, config: RefinerConfig) -> None:
    stub_llm.output = "Write a haiku about autumn."
    server = RefinePromptServer(config, llm=stub_llm)
    handler = server.server.request_handlers[types.CallToolRequest]

    response = await handler(_call_request("refine_prompt", {"prompt": "poem autumn"}))

    assert isinstance(response.root, types.CallToolResult)
    assert response.root.isError is False
    assert response.root.content[0].text == "Write a haiku about autumn."


@pytest.mark.asyncio
@pytest.mark.parametrize("arguments", [{"prompt": 123}, None])
async def test_call_tool_request_invalid_arguments_use_own_message(
    stub_llm: Any, config: RefinerConfig, arguments: Any
) -> None:
    server = RefinePromptServer(config, llm=stub_llm)
    handler = server.server.request_handlers[types.CallToolRequest]

    response = await handler(_call_request("refine_prompt", arguments))

    assert response.root.isError is True
    assert response.root.content[0].text.startswith("Error executing tool 'refine_prompt': Invalid arguments")
    assert stub_llm.calls == []


@pytest.mark.asyncio
async def test_call_tool_request_unknown_tool(stub_llm: Any, config: RefinerConfig) -> None:
    server = RefinePromptServer(config, llm=stub_llm)
    handler = server.server.request_handlers[types.CallToolRequest]

    response = await handler(_call_request("nonexistent", {"prompt": "x"}))

    assert response.root.isError is True
    assert response.root.content[0].text == "Error: Unknown tool called: nonexistent"


@pytest.mark.asyncio
async def test_failure_while_serving_is_fatal(stub_llm: Any, config: RefinerConfig) -> None:
    @asynccontextmanager
    async def fake_stdio_server() -> Any:
        yield MagicMock(), MagicMock()

    server = RefinePromptServer(config, llm=stub_llm)

    with (
        patch("prompt_refiner.mcp_server.server.stdio_server", fake_stdio_server),
        patch.object(server.server, "run", AsyncMock(side_effect=BrokenPipeError("host went away"))),
    ):
        with pytest.raises(TransportStartupError, match="while serving.*host went away"):
            await server.run()
