"""Main CLI entry point for masuk.

This module defines the main CLI group, the global options shared by all
commands and the routing that lets a bare profile name act as a command.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from masuk.cli.context import Context, pass_context
from masuk.cli.profiles import (
    connect_profile,
    fail,
    profiles_add,
    profiles_list,
    profiles_remove,
    show_help,
)
from masuk.core.config import get_default_config_path
from masuk.core.exceptions import MasukError, NoProfileSpecifiedError
from masuk.core.resolver import resolve_direct
from masuk.utils.logging import configure_logging, get_logger
from masuk.utils.output import error_console, print_error

logger = get_logger("cli")


class MasukGroup(click.Group):
    """Command group that falls back to connecting when no command matches.

    - A single non-reserved token is always a profile name, even if it
      looks like an option.
    - ``ls`` and ``rm`` are aliases for ``list`` and ``remove``.
    - Any other unknown leading token is handed, together with the tokens
      after it, to the hidden connect command.
    """

    aliases = {"ls": "list", "rm": "remove"}

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        action = resolve_direct(args)
        if action is not None:
            # Stop option parsing so a profile like "-x" is not read as a flag
            args = ["--", action.profile]
        return super().parse_args(ctx, args)

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if self.get_command(ctx, args[0]) is None:
            logger.debug(f"'{args[0]}' is not a command, treating it as a profile")
            return connect_profile.name, connect_profile, list(args)
        return super().resolve_command(ctx, args)


@click.group(
    cls=MasukGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (-v, -vv for more).",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Show what would happen without writing the config file or connecting.",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Show full error tracebacks.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help=f"Path to config file (default: {get_default_config_path()}).",
)
@pass_context
def cli(
    ctx: Context,
    verbose: int,
    dry_run: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """masuk - SSH host and port manager.

    Save SSH connection details under memorable names and connect
    with a single word.

    Examples:

        # Add a profile with user and port

        $ masuk add dev -h dev.example.com -u root -p 2222

        # Connect to a profile

        $ masuk dev

        # List all profiles

        $ masuk ls

        # Remove a profile

        $ masuk rm dev
    """
    ctx.verbose = verbose
    ctx.dry_run = dry_run
    ctx.debug = debug

    # Configure logging based on verbosity
    configure_logging(verbosity=verbose)

    if config_path:
        ctx.config_path = Path(config_path)

    if click.get_current_context().invoked_subcommand is None:
        fail(NoProfileSpecifiedError())


# Register subcommands
cli.add_command(profiles_add)
cli.add_command(profiles_list)
cli.add_command(profiles_remove)
cli.add_command(show_help)


def main() -> None:
    """Main entry point with error handling."""
    try:
        cli(standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except MasukError as e:
        print_error(str(e))
        sys.exit(e.exit_code)
    except click.Abort:
        error_console.print("\n[dim]Interrupted[/dim]")
        sys.exit(130)
    except Exception as e:
        if "--debug" in sys.argv:
            import traceback

            traceback.print_exc()
        else:
            print_error(f"Unexpected error: {e}")
            error_console.print("[dim]Use --debug for full traceback[/dim]")
        sys.exit(1)


if __name__ == "__main__":
    main()
