"""Render calculator chains as human-readable expressions."""

from __future__ import annotations

from calckit.core.arithmetic import Number
from calckit.core.calculator import Calculator


def format_number(n: Number) -> str:
    """Format a number, showing integral floats without a decimal point.

    Examples:
        >>> format_number(5.0)
        '5'
        >>> format_number(2.5)
        '2.5'
    """
    if isinstance(n, float) and n.is_integer():
        return str(int(n))
    return str(n)


def format_history(calculator: Calculator) -> str:
    """Format a calculator's applied operations as an expression.

    Examples:
        >>> format_history(Calculator(10).add(5).subtract(3))
        '10 + 5 - 3 = 12'
    """
    # Records dropped by history_limit are elided
    start = "..." if calculator.history_truncated else format_number(calculator.initial_value)
    parts = [start]
    for record in calculator.history:
        parts.append(f"{record.operation.symbol} {format_number(record.operand)}")

    return f"{' '.join(parts)} = {format_number(calculator.get_result())}"
