"""Utility modules for the rules engine."""

from .rich_logging import console, setup_rich_logging

__all__ = ["console", "setup_rich_logging"]
