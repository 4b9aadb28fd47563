"""Provider-agnostic message models sent to the completion provider."""

from abc import ABC
from typing import List

from pydantic import BaseModel, ConfigDict


class BaseMessage(ABC, BaseModel):
    """Base model for messages exchanged with an LLM.

    Attributes:
        author: Role associated with the message.
        content: Text payload of the message.
    """

    model_config = ConfigDict(frozen=True)

    author: str
    content: str


class SystemMessage(BaseMessage):
    """Message authored by the system to steer behavior."""

    author: str = "system"


class UserMessage(BaseMessage):
    """Message authored by an end user."""

    author: str = "user"


class CompiledMessagePair(BaseModel):
    """The system instruction and user payload built for one refine request.

    Attributes:
        system_instruction: Instruction set for the rewriting model.
        user_payload: The cleaned prompt wrapped in its delimiter template.
    """

    model_config = ConfigDict(frozen=True)

    system_instruction: str
    user_payload: str

    def as_messages(self) -> List[BaseMessage]:
        """Return the pair as an ordered conversation: system first, then user."""
        return [SystemMessage(content=self.system_instruction), UserMessage(content=self.user_payload)]
