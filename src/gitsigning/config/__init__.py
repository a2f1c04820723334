"""Public configuration access API for gitsigning."""

from __future__ import annotations

from .models import ConfigKey, InvalidConfigKeyError
from .protocol import ConfigEnum, ConfigStore
from .store import MemoryConfigStore

__all__ = [
    "ConfigEnum",
    "ConfigKey",
    "ConfigStore",
    "InvalidConfigKeyError",
    "MemoryConfigStore",
]
