"""Greeting helper."""


def greet(name: str) -> str:
    """Greet someone by name.

    The name is used exactly as given, so an empty name yields "Hello, !".

    Examples:
        >>> greet("World")
        'Hello, World!'
    """
    return f"Hello, {name}!"
