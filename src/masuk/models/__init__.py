"""Data models for masuk.

This module contains the Pydantic model for stored connection profiles.
"""

from masuk.models.host import HostConfig

__all__ = [
    "HostConfig",
]
