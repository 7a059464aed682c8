"""Basic arithmetic on native Python numbers."""

from typing import Union

Number = Union[int, float]


def add(a: Number, b: Number) -> Number:
    """Add two numbers together.

    Args:
        a: First number (integer or float)
        b: Second number (integer or float)

    Returns:
        The sum of a and b. Infinities and NaN follow float semantics.

    Examples:
        >>> add(2, 3)
        5
        >>> add(-1, 1)
        0
    """
    return a + b
