"""CLI context for masuk.

This module defines the shared context object passed to all CLI commands,
extracted to avoid circular imports.
"""

from __future__ import annotations

from pathlib import Path

import click

from masuk.core.config import ConfigManager
from masuk.core.handlers import ProfileHandlers
from masuk.core.ssh import Launcher, SubprocessLauncher


class Context:
    """CLI context object passed to all commands.

    Holds the profile store, the ssh launcher and CLI options like
    verbosity and dry-run mode.

    Attributes:
        config: ConfigManager instance.
        launcher: Launcher used to run ssh.
        config_path: Path given with --config, if any.
        verbose: Verbosity level (0-2).
        dry_run: Whether to run in dry-run mode.
        debug: Whether to show debug tracebacks.
    """

    def __init__(self) -> None:
        self.config: ConfigManager | None = None
        self.launcher: Launcher | None = None
        self.config_path: Path | None = None
        self.verbose: int = 0
        self.dry_run: bool = False
        self.debug: bool = False

    def init_config(self) -> ConfigManager:
        """Initialize and load the profile store.

        Returns:
            ConfigManager instance with its configuration loaded.
        """
        if self.config is None:
            self.config = ConfigManager(self.config_path)
            self.config.load(initialize=not self.dry_run)
        return self.config

    def init_launcher(self) -> Launcher:
        """Initialize the ssh launcher.

        Returns:
            Launcher instance.
        """
        if self.launcher is None:
            self.launcher = SubprocessLauncher()
        return self.launcher

    def init_handlers(self) -> ProfileHandlers:
        """Build profile handlers over the store and launcher.

        Returns:
            ProfileHandlers instance.
        """
        return ProfileHandlers(
            self.init_config(),
            self.init_launcher(),
            dry_run=self.dry_run,
        )


pass_context = click.make_pass_decorator(Context, ensure=True)
