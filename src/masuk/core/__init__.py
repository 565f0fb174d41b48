"""Core functionality for masuk.

This module contains the core logic: the profile store, command
resolution, profile handlers and ssh launching.
"""

from masuk.core.config import Config, ConfigManager
from masuk.core.exceptions import (
    ConfigIoError,
    ConfigParseError,
    InvalidArgumentsError,
    MasukError,
    NoProfileSpecifiedError,
    ProfileNotFoundError,
    RemoteSessionFailedError,
    SubprocessLaunchError,
)
from masuk.core.handlers import ProfileHandlers
from masuk.core.ssh import SSHCommand, SubprocessLauncher

__all__ = [
    "Config",
    "ConfigIoError",
    "ConfigManager",
    "ConfigParseError",
    "InvalidArgumentsError",
    "MasukError",
    "NoProfileSpecifiedError",
    "ProfileHandlers",
    "ProfileNotFoundError",
    "RemoteSessionFailedError",
    "SSHCommand",
    "SubprocessLauncher",
    "SubprocessLaunchError",
]
