"""Shared utilities for AR Product Preview."""

import logging
from typing import Sequence

from rich.console import Console
from rich.logging import RichHandler

# Rich console for pretty output
console = Console()


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Set up logging with Rich handler."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )
    return logging.getLogger("arpreview")


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module."""
    return logging.getLogger(f"arpreview.{name}")


def vec3(values: Sequence[float], name: str = "vector") -> list[float]:
    """Coerce a 3-component sequence to a list of floats."""
    if len(values) != 3:
        raise ValueError(f"{name} must have exactly 3 components, got {len(values)}")
    return [float(v) for v in values]
