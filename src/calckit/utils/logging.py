"""Set up the calckit logger with rich formatting."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logger(name: str = "calckit", *, level: int = logging.WARNING) -> logging.Logger:
    """Attach a rich handler writing to stderr to the named logger.

    Args:
        name: Logger name, the package root by default
        level: Minimum level to emit

    Returns:
        The configured logger
    """
    handler = RichHandler(console=Console(stderr=True), markup=False, show_path=False)
    logger = logging.getLogger(name)
    logger.setLevel(level)
    # Clear existing handlers to prevent duplication
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger
