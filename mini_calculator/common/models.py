"""Pydantic models for calculator operations, requests and results."""
from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from mini_calculator.common.formatting import format_number


class Operation(str, Enum):
    """The closed set of supported binary operations."""

    ADD = "add"
    SUBTRACT = "sub"
    MULTIPLY = "mul"
    DIVIDE = "div"
    POWER = "pow"


# Mapping of accepted spellings (symbolic and keyword) to operations, looked up case-sensitively
ALIASES: Dict[str, Operation] = {
    "+": Operation.ADD,
    "add": Operation.ADD,
    "-": Operation.SUBTRACT,
    "sub": Operation.SUBTRACT,
    "*": Operation.MULTIPLY,
    "mul": Operation.MULTIPLY,
    "x": Operation.MULTIPLY,
    "/": Operation.DIVIDE,
    "div": Operation.DIVIDE,
    "^": Operation.POWER,
    "pow": Operation.POWER,
}

VALID_OPERATIONS: str = "+, -, *, /, ^ (or add, sub, mul, div, pow)"


class OperationRequest(BaseModel):
    """Represents a single parsed calculator command."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Command line as typed, trimmed")
    operation: Operation = Field(..., description="Operation selected by the first token")
    left: float = Field(..., description="First operand")
    right: float = Field(..., description="Second operand")


class OperationResult(BaseModel):
    """Represents the result of an evaluated calculator command."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original command line")
    operation: Operation = Field(..., description="Operation that was applied")
    result: float = Field(..., description="Numeric result of the operation")

    @property
    def text(self) -> str:
        """Result rendered the way the REPL prints it."""
        return format_number(self.result)
