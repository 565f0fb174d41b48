"""Tests for profile handlers."""

from __future__ import annotations

from pathlib import Path

import pytest
from conftest import FakeLauncher

from masuk.core.config import ConfigManager
from masuk.core.exceptions import (
    ProfileNotFoundError,
    RemoteSessionFailedError,
    SubprocessLaunchError,
)
from masuk.core.handlers import ProfileHandlers
from masuk.core.resolver import AddProfile
from masuk.models.host import HostConfig


@pytest.fixture
def handlers(config_manager: ConfigManager, fake_launcher: FakeLauncher) -> ProfileHandlers:
    """Create handlers over the sample store with a fake launcher."""
    return ProfileHandlers(config_manager, fake_launcher)


class TestAdd:
    """Tests for ProfileHandlers.add."""

    def test_add_persists(self, handlers: ProfileHandlers) -> None:
        """Test that a new profile is written to disk."""
        host = handlers.add(AddProfile(profile="new", host="192.168.1.81", user="root"))

        assert host == HostConfig(host="192.168.1.81", user="root")
        reloaded = ConfigManager(handlers.store.path).load()
        assert reloaded.profiles["new"] == host

    def test_add_overwrites(self, handlers: ProfileHandlers) -> None:
        """Test that adding an existing name replaces it."""
        handlers.add(AddProfile(profile="web", host="10.9.9.9"))

        reloaded = ConfigManager(handlers.store.path).load()
        assert reloaded.profiles["web"] == HostConfig(host="10.9.9.9")
        assert len(reloaded.profiles) == 3

    def test_add_dry_run_does_not_write(self, config_manager: ConfigManager) -> None:
        """Test that dry-run mode leaves the file alone."""
        before = config_manager.path.read_text()
        handlers = ProfileHandlers(config_manager, FakeLauncher(), dry_run=True)

        handlers.add(AddProfile(profile="new", host="h"))

        assert config_manager.path.read_text() == before


class TestList:
    """Tests for ProfileHandlers.list_profiles."""

    def test_sorted_by_name(self, handlers: ProfileHandlers) -> None:
        """Test that profiles come back sorted."""
        assert [name for name, _ in handlers.list_profiles()] == ["bastion", "db", "web"]

    def test_empty_store_is_not_written(self, empty_config_file: Path) -> None:
        """Test that listing an empty store does not touch the file."""
        before = empty_config_file.read_text()
        mtime = empty_config_file.stat().st_mtime_ns
        store = ConfigManager(empty_config_file)
        store.load()

        assert ProfileHandlers(store, FakeLauncher()).list_profiles() == []
        assert empty_config_file.read_text() == before
        assert empty_config_file.stat().st_mtime_ns == mtime


class TestRemove:
    """Tests for ProfileHandlers.remove."""

    def test_remove_persists(self, handlers: ProfileHandlers) -> None:
        """Test that a removed profile is gone from disk."""
        removed = handlers.remove("db")

        assert removed.host == "db.internal"
        reloaded = ConfigManager(handlers.store.path).load()
        assert sorted(reloaded.profiles) == ["bastion", "web"]

    @pytest.mark.parametrize("name", ["nonexistent", "WEB", ""])
    def test_remove_missing(self, handlers: ProfileHandlers, name: str) -> None:
        """Test that removing an absent name fails and changes nothing."""
        before = handlers.store.path.read_text()

        with pytest.raises(ProfileNotFoundError, match="not found"):
            handlers.remove(name)

        assert handlers.store.path.read_text() == before
        assert sorted(handlers.store.profiles) == ["bastion", "db", "web"]


class TestConnect:
    """Tests for ProfileHandlers.connect."""

    @pytest.mark.parametrize(
        ("user", "port", "expected"),
        [
            ("admin", 2200, ["ssh", "-p", "2200", "admin@10.0.0.5"]),
            (None, 2200, ["ssh", "-p", "2200", "10.0.0.5"]),
            ("admin", None, ["ssh", "admin@10.0.0.5"]),
            (None, None, ["ssh", "10.0.0.5"]),
        ],
    )
    def test_add_then_connect(
        self,
        handlers: ProfileHandlers,
        fake_launcher: FakeLauncher,
        user: str | None,
        port: int | None,
        expected: list[str],
    ) -> None:
        """Test that the target and port flag follow the stored profile."""
        handlers.add(AddProfile(profile="box", host="10.0.0.5", user=user, port=port))

        handlers.connect("box")

        assert fake_launcher.calls == [expected]

    def test_connect_missing(
        self, handlers: ProfileHandlers, fake_launcher: FakeLauncher
    ) -> None:
        """Test that an unknown profile fails with listing guidance."""
        with pytest.raises(ProfileNotFoundError, match="masuk ls"):
            handlers.connect("mybox")
        assert fake_launcher.calls == []

    def test_session_failure(self, config_manager: ConfigManager) -> None:
        """Test that a non-zero ssh status is reported with that status."""
        handlers = ProfileHandlers(config_manager, FakeLauncher(returncode=255))

        with pytest.raises(RemoteSessionFailedError) as exc_info:
            handlers.connect("web")

        assert exc_info.value.returncode == 255
        assert exc_info.value.exit_code == 255

    def test_session_killed_by_signal(self, config_manager: ConfigManager) -> None:
        """Test that a signal death maps to 128 + signal number."""
        handlers = ProfileHandlers(config_manager, FakeLauncher(returncode=-2))

        with pytest.raises(RemoteSessionFailedError) as exc_info:
            handlers.connect("web")

        assert exc_info.value.exit_code == 130

    def test_launch_failure_propagates(self, config_manager: ConfigManager) -> None:
        """Test that a launcher that cannot start ssh is surfaced."""

        class BrokenLauncher:
            def run(self, argv: list[str]) -> int:
                raise SubprocessLaunchError(argv[0], "not found")

        handlers = ProfileHandlers(config_manager, BrokenLauncher())

        with pytest.raises(SubprocessLaunchError):
            handlers.connect("web")

    def test_dry_run_does_not_launch(self, config_manager: ConfigManager) -> None:
        """Test that dry-run mode returns the command without running it."""
        launcher = FakeLauncher()
        handlers = ProfileHandlers(config_manager, launcher, dry_run=True)

        command = handlers.connect("web")

        assert command.argv == ["ssh", "-p", "2200", "admin@10.0.0.5"]
        assert launcher.calls == []
