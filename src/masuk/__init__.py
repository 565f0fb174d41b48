"""masuk - SSH host and port manager.

This package stores named SSH connection profiles in a local JSON file
and connects to them by running the system ssh client.

Example:
    $ masuk add web -h 10.0.0.5 -u admin -p 2200
    $ masuk ls
    $ masuk web
"""

__version__ = "0.1.0"

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

__all__ = [
    "ConfigIoError",
    "ConfigParseError",
    "InvalidArgumentsError",
    "MasukError",
    "NoProfileSpecifiedError",
    "ProfileNotFoundError",
    "RemoteSessionFailedError",
    "SubprocessLaunchError",
    "__version__",
]
