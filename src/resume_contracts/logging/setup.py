"""Console logging configuration for the command line."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING", rich_output: bool = True) -> None:
    """Route standard library logging to stderr.

    Args:
        level: Name of the root log level (DEBUG, INFO, WARNING, ERROR).
        rich_output: Use rich formatting instead of plain text lines.
    """
    numeric = getattr(logging, level.upper(), logging.WARNING)
    if rich_output:
        console = Console(stderr=True)
        logging.basicConfig(
            level=numeric,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(console=console, show_path=False)],
            force=True,
        )
    else:
        logging.basicConfig(
            level=numeric,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            force=True,
        )
