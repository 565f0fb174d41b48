"""Pytest configuration and fixtures for masuk tests.

This module provides shared fixtures for testing masuk components
including temporary config files, sample profiles and a fake launcher.
"""

from __future__ import annotations

import json
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from masuk.core.config import ConfigManager
from masuk.models.host import HostConfig

if TYPE_CHECKING:
    from collections.abc import Generator

    from click.testing import CliRunner


class FakeLauncher:
    """Launcher that records argv instead of running ssh."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.calls: list[list[str]] = []

    def run(self, argv: Sequence[str]) -> int:
        self.calls.append(list(argv))
        return self.returncode


@pytest.fixture
def sample_host() -> HostConfig:
    """Create a sample HostConfig for testing."""
    return HostConfig(host="10.0.0.5", user="admin", port=2200)


@pytest.fixture
def sample_profiles() -> dict[str, HostConfig]:
    """Create a set of sample profiles for testing."""
    return {
        "web": HostConfig(host="10.0.0.5", user="admin", port=2200),
        "db": HostConfig(host="db.internal"),
        "bastion": HostConfig(host="bastion.example.com", user="ops"),
    }


@pytest.fixture
def temp_config_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for config files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_data(sample_profiles: dict[str, HostConfig]) -> dict:
    """Create sample configuration data."""
    return {
        "profiles": {name: cfg.to_dict() for name, cfg in sample_profiles.items()},
        "updated_at": 1700000000,
    }


@pytest.fixture
def temp_config_file(
    temp_config_dir: Path, sample_config_data: dict
) -> Generator[Path, None, None]:
    """Create a temporary config file with sample data."""
    config_path = temp_config_dir / "config.json"
    config_path.write_text(json.dumps(sample_config_data, indent=2))
    yield config_path


@pytest.fixture
def empty_config_file(temp_config_dir: Path) -> Path:
    """Create a temporary config file with no profiles."""
    config_path = temp_config_dir / "empty.json"
    config_path.write_text('{"profiles": {}, "updated_at": 1700000000}')
    return config_path


@pytest.fixture
def config_manager(temp_config_file: Path) -> ConfigManager:
    """Create a loaded ConfigManager over the temporary config file."""
    manager = ConfigManager(temp_config_file)
    manager.load()
    return manager


@pytest.fixture
def fake_launcher() -> FakeLauncher:
    """Create a launcher that succeeds without running anything."""
    return FakeLauncher()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner."""
    from click.testing import CliRunner

    return CliRunner()
