"""Structural interfaces for greeters and chainable calculators."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from calckit.core.arithmetic import Number


@runtime_checkable
class GreeterProtocol(Protocol):
    """Anything that turns a name into a greeting."""

    def __call__(self, name: str) -> str:
        ...


@runtime_checkable
class CalculatorProtocol(Protocol):
    """Protocol defining the chainable calculator interface."""

    def add(self, value: Number) -> CalculatorProtocol:
        """Add value to the running total and return the same calculator."""
        ...

    def subtract(self, value: Number) -> CalculatorProtocol:
        """Subtract value from the running total and return the same calculator."""
        ...

    def get_result(self) -> Number:
        """Return the running total."""
        ...
