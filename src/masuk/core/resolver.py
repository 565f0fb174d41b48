"""Command resolution for masuk.

Classifies command-line input into one of the tagged actions below. A
single token that is not a reserved command name is a direct connect, so
``masuk myhost`` works without a connect subcommand. Reserved names always
mean the built-in command, which leaves a profile literally named ``list``
unreachable from the command line.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from masuk.core.exceptions import InvalidArgumentsError, NoProfileSpecifiedError
from masuk.utils.logging import get_logger

logger = get_logger("resolver")

RESERVED_NAMES = frozenset({"add", "list", "ls", "remove", "rm", "help", "--help", "-h"})

MIN_PORT = 0
MAX_PORT = 65535


@dataclass(frozen=True)
class AddProfile:
    """Create or overwrite a profile."""

    profile: str
    host: str
    user: str | None = None
    port: int | None = None
    key: str | None = None


@dataclass(frozen=True)
class ListProfiles:
    """List every profile sorted by name."""

    fmt: str = "plain"


@dataclass(frozen=True)
class RemoveProfile:
    """Delete a profile."""

    profile: str


@dataclass(frozen=True)
class ConnectProfile:
    """Launch ssh for a stored profile."""

    profile: str


Action = AddProfile | ListProfiles | RemoveProfile | ConnectProfile


def is_reserved(token: str) -> bool:
    """Check whether a token names a built-in command or help flag."""
    return token in RESERVED_NAMES


def resolve_direct(args: Sequence[str]) -> ConnectProfile | None:
    """Apply the single-token fast path.

    Args:
        args: Command-line arguments without the program name.

    Returns:
        A ConnectProfile when ``args`` is exactly one non-reserved token,
        None when the arguments need structured parsing.
    """
    if len(args) == 1 and not is_reserved(args[0]):
        logger.debug(f"Resolved '{args[0]}' as a direct connect")
        return ConnectProfile(profile=args[0])
    return None


def resolve_external(tokens: Sequence[str]) -> ConnectProfile:
    """Resolve an unrecognized leading token as a profile to connect to.

    Only the first token is used; anything after it is ignored.

    Args:
        tokens: The unrecognized command token and everything after it.

    Returns:
        ConnectProfile for the first token.

    Raises:
        NoProfileSpecifiedError: If there are no tokens at all.
    """
    if not tokens:
        raise NoProfileSpecifiedError()
    if len(tokens) > 1:
        logger.debug(f"Ignoring extra arguments after profile: {list(tokens[1:])}")
    return ConnectProfile(profile=tokens[0])


def build_add(
    profile: str,
    host: str | None,
    user: str | None = None,
    port: int | None = None,
    key: str | None = None,
) -> AddProfile:
    """Validate ``add`` arguments and build the action.

    Raises:
        InvalidArgumentsError: If the profile or host is missing or empty,
            or the port is outside 0-65535.
    """
    if not profile:
        raise InvalidArgumentsError("Profile name must not be empty")
    if not host:
        raise InvalidArgumentsError(
            "Host is required. Usage: masuk add <profile> -h <host> [-u <user>] [-p <port>]"
        )
    if port is not None and not MIN_PORT <= port <= MAX_PORT:
        raise InvalidArgumentsError(
            f"Invalid port {port}: must be between {MIN_PORT} and {MAX_PORT}",
            details={"port": port},
        )
    return AddProfile(
        profile=profile,
        host=host,
        user=user or None,
        port=port,
        key=key or None,
    )
