"""Rich terminal output utilities for masuk.

This module provides formatted output using the Rich library for
status messages and the profile listing.
"""

from __future__ import annotations

import json
from enum import Enum

import yaml
from rich.console import Console
from rich.markup import escape

from masuk.models.host import HostConfig

# Lines are never hard-wrapped so piped output keeps one profile per line
console = Console(soft_wrap=True)
error_console = Console(stderr=True, soft_wrap=True)

EMPTY_HINT = "No profiles configured yet. Use 'masuk add <profile> -h <host>' to add one."


class OutputFormat(str, Enum):
    """Supported output formats."""

    PLAIN = "plain"
    JSON = "json"
    YAML = "yaml"


def describe(config: HostConfig) -> str:
    """Display form plus the identity file when one is set."""
    if config.key:
        return f"{config.display} (key: {config.key})"
    return config.display


class OutputFormatter:
    """Handles formatting and outputting profiles in various formats.

    Args:
        format_type: Output format to use (plain, json, yaml).
        output_console: Rich console instance for output.

    Example:
        >>> formatter = OutputFormatter(OutputFormat.JSON)
        >>> formatter.print_profiles([("web", HostConfig(host="10.0.0.5"))])
    """

    def __init__(
        self,
        format_type: OutputFormat = OutputFormat.PLAIN,
        output_console: Console | None = None,
    ) -> None:
        self.format_type = format_type
        self.console = output_console or console

    def print_profiles(self, profiles: list[tuple[str, HostConfig]]) -> None:
        """Print profiles in the order given.

        Args:
            profiles: (name, HostConfig) pairs, already sorted.
        """
        if self.format_type == OutputFormat.JSON:
            data = {name: cfg.to_dict() for name, cfg in profiles}
            self.console.print_json(json.dumps(data, indent=2))
        elif self.format_type == OutputFormat.YAML:
            data = {name: cfg.to_dict() for name, cfg in profiles}
            self.console.print(
                escape(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))
            )
        else:
            self._print_profiles_plain(profiles)

    def _print_profiles_plain(self, profiles: list[tuple[str, HostConfig]]) -> None:
        """Print profiles as ``name → display`` lines."""
        self.console.print("\nConfigured profiles:\n")
        for name, cfg in profiles:
            self.console.print(f"  {escape(name)} → {escape(describe(cfg))}")
        self.console.print()


def print_success(message: str) -> None:
    """Print a success message.

    Args:
        message: Success message to display.
    """
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message to stderr.

    Args:
        message: Error message to display.
    """
    error_console.print(f"[red]✗[/red] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message.

    Args:
        message: Info message to display.
    """
    console.print(escape(message))
