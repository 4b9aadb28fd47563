"""Parse untyped tool call payloads into typed argument models in a single pass."""

from collections.abc import Mapping
from typing import Any, Generic, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from ...exceptions import InvalidArgumentsError
from ...logger import get_logger

logger = get_logger(__name__)

ArgsT = TypeVar("ArgsT", bound=BaseModel)


class RefinePromptArgs(BaseModel):
    """Validated arguments of the ``refine_prompt`` tool.

    Strict mode: no coercion, so ``123`` is rejected as a prompt instead of becoming ``"123"``.

    Attributes:
        prompt: The raw user prompt.
        language: Optional programming language hint.
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    prompt: str
    language: Optional[str] = None


class ArgumentValidator(Generic[ArgsT]):
    """Converts the raw ``arguments`` mapping of a tool call into ``args_model``.

    Any mismatch fails closed with an ``InvalidArgumentsError`` naming the expected shape.
    """

    def __init__(self, args_model: Type[ArgsT], tool_name: str, expected_shape: str):
        """
        Args:
            args_model: Strict pydantic model describing the accepted fields.
            tool_name: Tool name used in error messages.
            expected_shape: Human readable shape used in error messages.
        """
        self.args_model = args_model
        self.tool_name = tool_name
        self.expected_shape = expected_shape

    def validate(self, payload: Any) -> ArgsT:
        """Validate ``payload`` and return the typed arguments.

        Args:
            payload: Untyped argument payload from the transport.

        Returns:
            An instance of ``args_model``.

        Raises:
            InvalidArgumentsError: If the payload is missing, not an object, or has wrongly typed fields.
        """
        if payload is None:
            raise InvalidArgumentsError("No arguments provided for tool call.")

        if not isinstance(payload, Mapping):
            msg = f"{self._shape_message()} Got {type(payload).__name__} instead of an object."
            logger.warning(msg)
            raise InvalidArgumentsError(msg)

        try:
            return self.args_model.model_validate(dict(payload))
        except ValidationError as exc:
            details = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}" for err in exc.errors()
            )
            msg = f"{self._shape_message()} {details}"
            logger.warning(f"Invalid arguments received: {details}")
            raise InvalidArgumentsError(msg) from exc

    def _shape_message(self) -> str:
        return f"Invalid arguments for tool '{self.tool_name}'. Expected: {self.expected_shape}."
