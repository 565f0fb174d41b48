"""CLI module for masuk.

This package contains all Click command definitions for the masuk CLI.
"""

from masuk.cli.main import cli, main

__all__ = ["cli", "main"]
