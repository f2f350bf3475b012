"""
Rich-based logging for embedding applications and scripts.

The library only emits through `logging`; call `setup_rich_logging` once
from an entry point to get readable console output for move diagnostics.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)


def setup_rich_logging(level: str = "INFO") -> RichHandler:
    """
    Configure the root logger to write through the rich console.

    Args:
        level: Logging level name, e.g. "DEBUG" or "warning"

    Returns:
        The installed handler
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger.addHandler(rich_handler)
    root_logger.setLevel(getattr(logging, level.upper()))
    return rich_handler
