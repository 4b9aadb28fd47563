from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ToolDescriptor(BaseModel):
    """
    Represents the definition of a tool exposed to the MCP host.

    Attributes:
        name: The unique name of the tool.
        description: Tells the host when to invoke the tool.
        input_schema: JSON schema describing the accepted argument fields.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    input_schema: Dict[str, Any]


class ToolCallRequest(BaseModel):
    """A single "call tool" request as handed over by the transport.

    Attributes:
        name: Name of the tool to run.
        arguments: Untyped argument payload, validated by the tool itself.
    """

    name: str
    arguments: Optional[Any] = None


class TextBlock(BaseModel):
    """One text content block of a tool response."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ToolResponseEnvelope(BaseModel):
    """Outcome of one tool call, success or error, ready for the transport.

    Attributes:
        content: Ordered content blocks.
        is_error: Whether the call failed.
    """

    model_config = ConfigDict(frozen=True)

    content: List[TextBlock] = Field(default_factory=list)
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> "ToolResponseEnvelope":
        return cls(content=[TextBlock(text=text)], is_error=False)

    @classmethod
    def failure(cls, text: str) -> "ToolResponseEnvelope":
        return cls(content=[TextBlock(text=text)], is_error=True)

    @property
    def text(self) -> str:
        """All text blocks joined by newlines."""
        return "\n".join(block.text for block in self.content)
