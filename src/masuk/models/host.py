"""Profile model for masuk.

This module defines the data model for one stored connection profile.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HostConfig(BaseModel):
    """Connection parameters stored under a profile name.

    Args:
        host: IP address or hostname passed to ssh.
        user: Remote username (ssh picks the local user if not specified).
        port: SSH port (ssh uses its own default if not specified).
        key: Path to an identity file passed with ``-i``.

    Example:
        >>> cfg = HostConfig(host="10.0.0.5", user="admin", port=2200)
        >>> cfg.display
        'admin@10.0.0.5:2200'
    """

    model_config = ConfigDict(strict=True)

    host: Annotated[str, Field(min_length=1, description="IP address or hostname")]
    user: str | None = Field(default=None, description="SSH username")
    port: int | None = Field(default=None, ge=0, le=65535, description="SSH port")
    key: str | None = Field(default=None, description="Path to SSH identity file")

    @field_validator("key")
    @classmethod
    def expand_key_path(cls, v: str | None) -> str | None:
        """Expand ~ in identity file path."""
        if v is not None:
            return str(Path(v).expanduser())
        return v

    @property
    def target(self) -> str:
        """The ssh destination, ``user@host`` or just ``host``."""
        if self.user:
            return f"{self.user}@{self.host}"
        return self.host

    @property
    def display(self) -> str:
        """Human-readable ``user@host:port`` form with absent parts elided."""
        if self.port is not None:
            return f"{self.target}:{self.port}"
        return self.target

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return self.model_dump(exclude_none=True)
