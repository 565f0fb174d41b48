"""SSH command construction and process launching.

masuk never speaks the SSH protocol itself. It builds an argument vector
for the system ``ssh`` client and runs it with the terminal attached,
blocking until the session ends.
"""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from masuk.core.exceptions import SubprocessLaunchError
from masuk.models.host import HostConfig
from masuk.utils.logging import get_logger

logger = get_logger("ssh")

SSH_EXECUTABLE = "ssh"


@dataclass(frozen=True)
class SSHCommand:
    """An ssh invocation for one profile.

    Args:
        target: Destination, ``user@host`` or ``host``.
        port: Port passed with ``-p``, if any.
        identity_file: Identity file passed with ``-i``, if any.
        executable: Program to run.

    Example:
        >>> cmd = SSHCommand.from_host(HostConfig(host="10.0.0.5", port=2200))
        >>> cmd.argv
        ['ssh', '-p', '2200', '10.0.0.5']
    """

    target: str
    port: int | None = None
    identity_file: str | None = None
    executable: str = SSH_EXECUTABLE

    @classmethod
    def from_host(cls, host: HostConfig, executable: str = SSH_EXECUTABLE) -> SSHCommand:
        """Build the command for a stored profile."""
        return cls(
            target=host.target,
            port=host.port,
            identity_file=host.key,
            executable=executable,
        )

    @property
    def argv(self) -> list[str]:
        """Full argument vector, program name first."""
        args = [self.executable]
        if self.port is not None:
            args += ["-p", str(self.port)]
        if self.identity_file:
            args += ["-i", self.identity_file]
        args.append(self.target)
        return args

    def __str__(self) -> str:
        return shlex.join(self.argv)


class Launcher(Protocol):
    """Runs a program to completion with the caller's stdio."""

    def run(self, argv: Sequence[str]) -> int:
        """Run ``argv`` and return its exit status."""
        ...


class SubprocessLauncher:
    """Launcher backed by :func:`subprocess.run`.

    The child inherits stdin, stdout and stderr, so an interactive session
    behaves as if ssh had been started directly. No timeout is applied.
    """

    def run(self, argv: Sequence[str]) -> int:
        """Run ``argv`` and wait for it to exit.

        Args:
            argv: Program and arguments.

        Returns:
            The child's return code (negative if killed by a signal).

        Raises:
            SubprocessLaunchError: If the program cannot be started.
        """
        logger.debug(f"Executing: {shlex.join(argv)}")
        try:
            completed = subprocess.run(list(argv), check=False)
        except OSError as e:
            raise SubprocessLaunchError(argv[0], e.strerror or str(e)) from e

        logger.debug(f"{argv[0]} exited with status {completed.returncode}")
        return completed.returncode
