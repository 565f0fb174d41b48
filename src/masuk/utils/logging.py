"""Diagnostic logging for masuk.

Everything is logged under the ``masuk`` logger to stderr, which keeps
diagnostics out of the profile listing and away from the ssh session's
stdout. The ``-v`` count picks the level: WARNING by default, INFO with
one flag and DEBUG with two or more.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def get_log_level(verbosity: int) -> int:
    """Map the number of ``-v`` flags to a logging level."""
    index = max(0, min(verbosity, len(_VERBOSITY_LEVELS) - 1))
    return _VERBOSITY_LEVELS[index]


def configure_logging(verbosity: int = 0) -> None:
    """Install a single stderr handler on the ``masuk`` logger.

    Calling it again replaces the previous handler, so repeated CLI
    invocations in one process do not duplicate log lines.

    Args:
        verbosity: Number of -v flags from the command line.
    """
    level = get_log_level(verbosity)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger("masuk")
    package_logger.setLevel(level)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the ``masuk.<name>`` child logger.

    Example:
        >>> logger = get_logger("config")
        >>> logger.info("Loaded 3 profile(s)")
    """
    if name == "masuk" or name.startswith("masuk."):
        return logging.getLogger(name)
    return logging.getLogger(f"masuk.{name}")
