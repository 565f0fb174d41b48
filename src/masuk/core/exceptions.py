"""Custom exceptions for masuk.

Every failure is fatal to the current invocation. Each exception carries
the process exit status the CLI should use when reporting it.

Exception Hierarchy:
    MasukError (base)
    ├── ConfigError
    │   ├── ConfigIoError
    │   └── ConfigParseError
    ├── InvalidArgumentsError
    ├── ProfileNotFoundError
    ├── NoProfileSpecifiedError
    └── LaunchError
        ├── SubprocessLaunchError
        └── RemoteSessionFailedError
"""

from __future__ import annotations

from typing import Any


class MasukError(Exception):
    """Base exception for all masuk errors.

    Args:
        message: Human-readable error message.
        details: Optional dictionary with additional error context.

    Attributes:
        message: The error message.
        details: Additional context about the error.
        exit_code: Process exit status used when this error is reported.
    """

    exit_code: int = 1

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class ConfigError(MasukError):
    """Raised when the profile store cannot be used."""


class ConfigIoError(ConfigError):
    """Raised when reading or writing the config file fails.

    Args:
        operation: What was being done ('read', 'write', 'create directory').
        path: The config file path.
        reason: Description of the underlying OS error.
    """

    def __init__(self, operation: str, path: str, reason: str) -> None:
        super().__init__(
            f"Failed to {operation} config file: {reason}",
            details={"path": path},
        )
        self.operation = operation
        self.path = path


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid JSON or violates the schema.

    Args:
        path: The config file path.
        reason: Description of the parse or validation failure.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"Failed to parse config file: {reason}",
            details={"path": path},
        )
        self.path = path


class InvalidArgumentsError(MasukError):
    """Raised when command-line arguments have the wrong shape or range."""

    exit_code = 2


class ProfileNotFoundError(MasukError):
    """Raised when a named profile is not in the store.

    Args:
        name: The profile name that was looked up.
        hint: Optional guidance appended to the message.
    """

    def __init__(self, name: str, hint: str | None = None) -> None:
        message = f"Profile '{name}' not found"
        if hint:
            message = f"{message}. {hint}"
        super().__init__(message)
        self.name = name


class NoProfileSpecifiedError(MasukError):
    """Raised when a connect is requested without any profile name."""

    def __init__(self) -> None:
        super().__init__(
            "No profile specified. Use 'masuk ls' to see available profiles."
        )


class LaunchError(MasukError):
    """Raised when the ssh client cannot complete a session."""


class SubprocessLaunchError(LaunchError):
    """Raised when the ssh executable cannot be started at all.

    Args:
        executable: The program that was launched.
        reason: Description of the exec failure.
    """

    def __init__(self, executable: str, reason: str) -> None:
        super().__init__(
            f"Failed to execute '{executable}': {reason}",
            details={"executable": executable},
        )
        self.executable = executable


class RemoteSessionFailedError(LaunchError):
    """Raised when the ssh session ends with a non-zero status.

    The instance exit code mirrors the child's status so that it can be
    relayed to the shell. A child killed by signal N maps to 128 + N.

    Args:
        profile: The profile that was connected to.
        returncode: The child's return code as reported by subprocess.
    """

    def __init__(self, profile: str, returncode: int) -> None:
        super().__init__(
            f"SSH connection to '{profile}' failed",
            details={"exit_status": returncode},
        )
        self.profile = profile
        self.returncode = returncode
        self.exit_code = returncode if returncode > 0 else 128 - returncode
