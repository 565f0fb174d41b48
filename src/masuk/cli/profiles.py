"""Profile commands for masuk.

This module provides the add, list, remove and help commands, the hidden
fallback command that treats an unknown leading token as a profile name,
and the single dispatch point that runs every resolved action.
"""

from __future__ import annotations

from typing import NoReturn

import click

from masuk.cli.context import Context, pass_context
from masuk.core.exceptions import MasukError
from masuk.core.resolver import (
    Action,
    AddProfile,
    ConnectProfile,
    ListProfiles,
    RemoveProfile,
    build_add,
    resolve_external,
)
from masuk.utils.output import (
    EMPTY_HINT,
    OutputFormat,
    OutputFormatter,
    describe,
    print_error,
    print_info,
    print_success,
)


def fail(error: MasukError) -> NoReturn:
    """Report an error on stderr and exit with its status."""
    print_error(str(error))
    raise SystemExit(error.exit_code) from error


def run_action(ctx: Context, action: Action) -> None:
    """Run a resolved action against the profile store and report the result.

    Args:
        ctx: CLI context holding the store and launcher.
        action: The action produced by the resolver.
    """
    try:
        handlers = ctx.init_handlers()

        if isinstance(action, AddProfile):
            host = handlers.add(action)
            print_success(f"Added profile '{action.profile}' → {describe(host)}")

        elif isinstance(action, ListProfiles):
            profiles = handlers.list_profiles()
            if not profiles:
                print_info(EMPTY_HINT)
                return
            OutputFormatter(OutputFormat(action.fmt)).print_profiles(profiles)
            return

        elif isinstance(action, RemoveProfile):
            handlers.remove(action.profile)
            print_success(f"Removed profile '{action.profile}'")

        elif isinstance(action, ConnectProfile):
            host = handlers.get(action.profile)
            print_info(f"Connecting to {action.profile} ({host.display})...")
            command = handlers.connect(action.profile)
            if ctx.dry_run:
                print_info(f"[DRY RUN] Would execute: {command}")
            return

        # Only add and remove reach this point
        if ctx.dry_run:
            print_info("[DRY RUN] Configuration not saved")

    except MasukError as e:
        fail(e)


@click.command("add", context_settings={"help_option_names": ["--help"]})
@click.argument("profile")
@click.option(
    "--host",
    "-h",
    "host",
    default=None,
    help="Host or IP address (required).",
)
@click.option(
    "--user",
    "-u",
    default=None,
    help="SSH user (defaults to the current user).",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="SSH port (omit to use the ssh default).",
)
@click.option(
    "--key",
    "-k",
    default=None,
    help="Path to SSH identity file.",
)
@pass_context
def profiles_add(
    ctx: Context,
    profile: str,
    host: str | None,
    user: str | None,
    port: int | None,
    key: str | None,
) -> None:
    """Add a profile with host and optional user/port.

    PROFILE is the name used to connect later. An existing profile
    with the same name is overwritten.

    Examples:

        $ masuk add foobar -h 192.168.1.81 -u root -p 2222

        $ masuk add dev -h dev.example.com -k ~/.ssh/id_ed25519
    """
    try:
        action = build_add(profile, host, user=user, port=port, key=key)
    except MasukError as e:
        fail(e)

    run_action(ctx, action)


@click.command("list")
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.PLAIN.value,
    help="Output format.",
)
@pass_context
def profiles_list(ctx: Context, fmt: str) -> None:
    """List all configured profiles (alias: ls).

    Examples:

        $ masuk list

        $ masuk ls --format json
    """
    run_action(ctx, ListProfiles(fmt=fmt))


@click.command("remove")
@click.argument("profile")
@pass_context
def profiles_remove(ctx: Context, profile: str) -> None:
    """Remove a profile (alias: rm).

    PROFILE is the name of the profile to delete.

    Examples:

        $ masuk remove foobar

        $ masuk rm foobar
    """
    run_action(ctx, RemoveProfile(profile=profile))


@click.command("help")
@click.pass_context
def show_help(click_ctx: click.Context) -> None:
    """Show this help message."""
    parent = click_ctx.parent or click_ctx
    click.echo(parent.get_help())


@click.command(
    "connect",
    hidden=True,
    add_help_option=False,
    context_settings={"ignore_unknown_options": True},
)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
@pass_context
def connect_profile(ctx: Context, tokens: tuple[str, ...]) -> None:
    """Connect to the profile named by the first token."""
    try:
        action = resolve_external(tokens)
    except MasukError as e:
        fail(e)

    run_action(ctx, action)
