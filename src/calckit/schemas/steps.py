"""Pydantic models for calculation steps and YAML calculation scripts."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class StepParseError(ValueError):
    """Error raised when a number or step cannot be parsed."""

    pass


class Operation(str, Enum):
    """Operations a calculator can apply."""

    ADD = "add"
    SUBTRACT = "subtract"

    @property
    def symbol(self) -> str:
        """Infix symbol used when rendering a chain."""
        return "+" if self is Operation.ADD else "-"


# Accepted spellings for each operation in "<op>:<number>" steps
OPERATION_ALIASES: dict[str, Operation] = {
    "add": Operation.ADD,
    "+": Operation.ADD,
    "subtract": Operation.SUBTRACT,
    "sub": Operation.SUBTRACT,
    "-": Operation.SUBTRACT,
}


def parse_number(text: str) -> int | float:
    """Parse a number, keeping integer literals as int.

    Args:
        text: Number as typed by the user (e.g. "5", "-2.5", "inf")

    Returns:
        An int for integer literals, otherwise a float

    Raises:
        StepParseError: If text is not a number
    """
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass

    try:
        return float(text)
    except ValueError:
        raise StepParseError(f"Not a number: {text!r}") from None


class Step(BaseModel):
    """A single operation applied to a calculator."""

    operation: Operation = Field(..., description="Operation to apply")
    operand: int | float = Field(..., description="Right-hand operand")

    @classmethod
    def parse(cls, text: str) -> "Step":
        """Parse a step written as "<op>:<number>", e.g. "add:5" or "-:3"."""
        op_name, sep, number = text.partition(":")
        if not sep:
            raise StepParseError(
                f"Invalid step {text!r}: expected '<operation>:<number>'"
            )

        operation = OPERATION_ALIASES.get(op_name.strip().lower())
        if operation is None:
            raise StepParseError(f"Unknown operation in step {text!r}: {op_name!r}")

        return cls(operation=operation, operand=parse_number(number))


class CalculationScript(BaseModel):
    """A YAML calculation script: an optional start value and ordered steps."""

    start: int | float | None = Field(
        default=None, description="Initial value, overrides the configured one"
    )
    steps: list[Step] = Field(default_factory=list)

    @classmethod
    def load(cls, path: str | Path) -> "CalculationScript":
        """Load a script from a YAML file."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls.model_validate(data)
