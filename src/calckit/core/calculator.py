"""Chainable calculator with a recorded operation history."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

from calckit.core.arithmetic import Number
from calckit.schemas.steps import Operation, Step

logger = logging.getLogger(__name__)


class UnknownOperationError(ValueError):
    """Error raised when an operation name has no calculator method."""

    pass


@dataclass(frozen=True)
class OperationRecord:
    """One applied operation and the value it produced."""

    operation: Operation
    operand: Number
    result: Number


class Calculator:
    """Running total updated in place by fluent add/subtract calls.

    Every mutator returns the calculator itself, so calls chain and are
    applied strictly left to right:

        >>> Calculator(10).add(5).subtract(3).add(2).get_result()
        14

    Each mutation is recorded in the history. The history is unbounded
    unless history_limit is set, in which case only the newest records
    are kept.
    """

    def __init__(self, initial_value: Number = 0, history_limit: int | None = None):
        """Initialize the calculator.

        Args:
            initial_value: Starting value, 0 when omitted
            history_limit: Maximum number of records kept, None for no limit
        """
        self._initial_value = initial_value
        self._value = initial_value
        self._history: deque[OperationRecord] = deque(maxlen=history_limit)
        self._operation_count = 0

    @property
    def initial_value(self) -> Number:
        """Get the value the calculator was created with."""
        return self._initial_value

    @property
    def value(self) -> Number:
        """Get the running total."""
        return self._value

    @property
    def history(self) -> list[OperationRecord]:
        """Get applied operations, oldest first."""
        return list(self._history)

    @property
    def history_truncated(self) -> bool:
        """Check if older records were dropped by history_limit."""
        return self._operation_count > len(self._history)

    def add(self, value: Number) -> Calculator:
        """Add value to the running total."""
        self._value = self._value + value
        self._record(Operation.ADD, value)
        return self

    def subtract(self, value: Number) -> Calculator:
        """Subtract value from the running total."""
        self._value = self._value - value
        self._record(Operation.SUBTRACT, value)
        return self

    def get_result(self) -> Number:
        """Get the running total without changing it."""
        return self._value

    def apply(self, operation: Operation | str, operand: Number) -> Calculator:
        """Apply an operation by enum member or name.

        Args:
            operation: Operation member, or its name (case-insensitive)
            operand: Right-hand operand

        Returns:
            This calculator

        Raises:
            UnknownOperationError: If operation names no calculator method
        """
        if not isinstance(operation, Operation):
            try:
                operation = Operation(str(operation).lower())
            except ValueError:
                raise UnknownOperationError(f"Unknown operation: {operation}") from None

        if operation is Operation.ADD:
            return self.add(operand)
        return self.subtract(operand)

    def run(self, steps: Iterable[Step]) -> Calculator:
        """Apply steps in order."""
        for step in steps:
            self.apply(step.operation, step.operand)
        return self

    def _record(self, operation: Operation, operand: Number) -> None:
        self._history.append(OperationRecord(operation, operand, self._value))
        self._operation_count += 1
        logger.debug("%s %s -> %s", operation.value, operand, self._value)

    def __repr__(self) -> str:
        return f"Calculator(value={self._value!r})"
