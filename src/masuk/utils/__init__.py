"""Utility modules for masuk.

This package contains shared utilities for logging and output formatting.
"""

from masuk.utils.logging import configure_logging, get_logger
from masuk.utils.output import OutputFormatter, console

__all__ = [
    "OutputFormatter",
    "configure_logging",
    "console",
    "get_logger",
]
