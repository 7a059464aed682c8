"""calckit: greeting, addition and a chainable calculator.

A small arithmetic utility library with a fluent accumulator and a
command-line front end.
"""

__version__ = "0.1.0"

from calckit.core.arithmetic import add
from calckit.core.calculator import Calculator
from calckit.core.greeting import greet

__all__ = ["greet", "add", "Calculator", "__version__"]
