"""Profile store for masuk.

This module provides a Pydantic-based configuration system that supports:
- A single JSON configuration file holding every profile
- Load-or-initialize on first run
- Atomic whole-file updates via a temporary file and rename
- Deterministic serialization that round-trips through the schema

The default config location is ~/.config/masuk/config.json, which can be
overridden with the global --config option.
"""

from __future__ import annotations

import json
import os
import tempfile
import time
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from masuk.core.exceptions import ConfigIoError, ConfigParseError
from masuk.models.host import HostConfig
from masuk.utils.logging import get_logger

logger = get_logger("config")


def get_default_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to the configuration file.
    """
    return Path.home() / ".config" / "masuk" / "config.json"


def _now() -> int:
    return int(time.time())


class Config(BaseModel):
    """Root model of the persisted configuration file.

    Args:
        profiles: Mapping of profile name to connection parameters.
        updated_at: Unix timestamp of the last save. Informational only.

    Example config.json:
        ```json
        {
          "profiles": {
            "web": {"host": "10.0.0.5", "port": 2200, "user": "admin"}
          },
          "updated_at": 1760659200
        }
        ```
    """

    model_config = ConfigDict(strict=True)

    profiles: dict[str, HostConfig] = Field(
        default_factory=dict, description="Configured profiles"
    )
    updated_at: int = Field(description="Unix timestamp of the last save")

    @classmethod
    def empty(cls) -> Config:
        """Create a configuration with no profiles, stamped with the current time."""
        return cls(updated_at=_now())

    def get_profile(self, name: str) -> HostConfig | None:
        """Get a profile by name.

        Args:
            name: The profile name (case-sensitive).

        Returns:
            The HostConfig if found, None otherwise.
        """
        return self.profiles.get(name)


def serialize(config: Config) -> str:
    """Render a Config as the JSON text written to disk."""
    data = config.model_dump(exclude_none=True)
    return json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False) + "\n"


def parse(text: str, path: str = "<string>") -> Config:
    """Parse JSON text into a validated Config.

    Args:
        text: Raw file contents.
        path: Where the text came from, used in error messages.

    Returns:
        Validated Config object.

    Raises:
        ConfigParseError: If the text is not valid JSON or violates the schema.
    """
    try:
        return Config.model_validate_json(text)
    except ValidationError as e:
        first = e.errors(include_url=False)[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise ConfigParseError(path, f"{location}: {first['msg']}") from e


class ConfigManager:
    """Reads and writes the masuk profile store.

    This class handles:
    - Creating the configuration directory
    - Initializing and persisting an empty store on first run
    - Validating the file with Pydantic
    - Replacing the whole file on every save

    Args:
        path: Optional path to config file. Uses default if not specified.

    Attributes:
        path: Path to the configuration file.
        config: The loaded Config, or None before ``load()``.

    Example:
        >>> store = ConfigManager()
        >>> config = store.load()
        >>> config.profiles["web"] = HostConfig(host="10.0.0.5")
        >>> store.save()
    """

    def __init__(self, path: Path | str | None = None) -> None:
        if path is None:
            self.path = get_default_config_path()
        else:
            self.path = Path(path).expanduser()
        self._config: Config | None = None

    @property
    def config(self) -> Config:
        """The loaded configuration, loading it on first access."""
        if self._config is None:
            return self.load()
        return self._config

    def _ensure_config_dir(self) -> None:
        """Ensure the configuration directory exists."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigIoError("create directory for", str(self.path), str(e)) from e

    def load(self, initialize: bool = True) -> Config:
        """Load the configuration, creating the file if it does not exist.

        Args:
            initialize: Write the empty configuration when the file is
                missing. With False the empty configuration is only held
                in memory.

        Returns:
            The loaded or newly initialized Config.

        Raises:
            ConfigIoError: If the file or directory cannot be accessed.
            ConfigParseError: If the file content is invalid.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            self._config = Config.empty()
            if initialize:
                logger.info(f"No config at {self.path}, creating an empty one")
                self.save()
            return self._config
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigIoError("read", str(self.path), str(e)) from e

        self._config = parse(text, str(self.path))
        logger.debug(f"Loaded {len(self._config.profiles)} profile(s) from {self.path}")
        return self._config

    def save(self, config: Config | None = None) -> None:
        """Persist the configuration, replacing the previous file content.

        The content is written to a temporary file beside the target and
        renamed over it, so readers see either the old or the new file.

        Args:
            config: Config to save. Defaults to the currently loaded one.

        Raises:
            ConfigIoError: If writing fails.
        """
        if config is not None:
            self._config = config
        config = self.config
        config.updated_at = _now()
        content = serialize(config)

        self._ensure_config_dir()
        tmp_path: Path | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=".config.", suffix=".tmp"
            )
            tmp_path = Path(tmp_name)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as e:
            raise ConfigIoError("write", str(self.path), str(e)) from e
        finally:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)

        logger.debug(f"Saved {len(config.profiles)} profile(s) to {self.path}")

    def get_profile(self, name: str) -> HostConfig | None:
        """Get a profile by name.

        Args:
            name: The profile name.

        Returns:
            The HostConfig if found, None otherwise.
        """
        return self.config.get_profile(name)

    @property
    def profiles(self) -> dict[str, HostConfig]:
        """Mapping of all configured profiles."""
        return self.config.profiles
