"""Profile operations for masuk.

``ProfileHandlers`` implements add, list, remove and connect on top of an
explicit store and launcher. Nothing here prints; the CLI reports results.
"""

from __future__ import annotations

from masuk.core.config import ConfigManager
from masuk.core.exceptions import ProfileNotFoundError, RemoteSessionFailedError
from masuk.core.resolver import AddProfile
from masuk.core.ssh import Launcher, SSHCommand, SubprocessLauncher
from masuk.models.host import HostConfig
from masuk.utils.logging import get_logger

logger = get_logger("handlers")

LIST_HINT = "Use 'masuk ls' to see available profiles."


class ProfileHandlers:
    """Executes resolved actions against the profile store.

    Args:
        store: Loaded profile store.
        launcher: Capability used to run ssh. Defaults to a subprocess launcher.
        dry_run: If True, mutations are not persisted and ssh is not run.

    Example:
        >>> handlers = ProfileHandlers(ConfigManager())
        >>> handlers.add(AddProfile(profile="web", host="10.0.0.5"))
        >>> handlers.connect("web")
    """

    def __init__(
        self,
        store: ConfigManager,
        launcher: Launcher | None = None,
        dry_run: bool = False,
    ) -> None:
        self.store = store
        self.launcher = launcher or SubprocessLauncher()
        self.dry_run = dry_run

    def _persist(self) -> None:
        if self.dry_run:
            logger.info("[DRY RUN] Not saving configuration")
            return
        self.store.save()

    def get(self, name: str) -> HostConfig:
        """Look up a profile.

        Raises:
            ProfileNotFoundError: If no profile has this name.
        """
        host = self.store.get_profile(name)
        if host is None:
            raise ProfileNotFoundError(name, hint=LIST_HINT)
        return host

    def add(self, action: AddProfile) -> HostConfig:
        """Insert or overwrite a profile and persist the store.

        Returns:
            The stored HostConfig.
        """
        host = HostConfig(
            host=action.host,
            user=action.user,
            port=action.port,
            key=action.key,
        )
        if action.profile in self.store.profiles:
            logger.info(f"Overwriting existing profile '{action.profile}'")
        self.store.profiles[action.profile] = host
        self._persist()
        logger.info(f"Added profile '{action.profile}' -> {host.display}")
        return host

    def list_profiles(self) -> list[tuple[str, HostConfig]]:
        """Return all profiles sorted by name. Never writes the store."""
        profiles = self.store.profiles
        return [(name, profiles[name]) for name in sorted(profiles)]

    def remove(self, name: str) -> HostConfig:
        """Delete a profile and persist the store.

        Returns:
            The removed HostConfig.

        Raises:
            ProfileNotFoundError: If no profile has this name.
        """
        profiles = self.store.profiles
        if name not in profiles:
            raise ProfileNotFoundError(name, hint=LIST_HINT)
        host = profiles.pop(name)
        self._persist()
        logger.info(f"Removed profile '{name}'")
        return host

    def connect(self, name: str) -> SSHCommand:
        """Run ssh for a profile and wait for the session to end.

        Returns:
            The command that was run (or would have been, in dry-run mode).

        Raises:
            ProfileNotFoundError: If no profile has this name.
            SubprocessLaunchError: If ssh cannot be started.
            RemoteSessionFailedError: If ssh exits with a non-zero status.
        """
        command = SSHCommand.from_host(self.get(name))
        if self.dry_run:
            logger.info(f"[DRY RUN] Would execute: {command}")
            return command

        logger.info(f"Connecting to '{name}' with: {command}")
        returncode = self.launcher.run(command.argv)
        if returncode != 0:
            raise RemoteSessionFailedError(name, returncode)
        return command
