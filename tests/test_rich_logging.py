"""Tests for rich logging setup."""

import logging

from rich.logging import RichHandler
from stack_tac_toe.utils import setup_rich_logging


def test_setup_rich_logging_replaces_handlers():
    """Test the root logger ends up with a single rich handler."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level

    try:
        handler = setup_rich_logging("debug")

        assert isinstance(handler, RichHandler)
        assert root_logger.handlers == [handler]
        assert root_logger.level == logging.DEBUG
    finally:
        for h in root_logger.handlers[:]:
            root_logger.removeHandler(h)
        for h in saved_handlers:
            root_logger.addHandler(h)
        root_logger.setLevel(saved_level)
