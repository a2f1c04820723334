"""In-memory configuration store with git's lookup rules."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from result import Result

from gitsigning.common import create_logger
from gitsigning.utils.git import ConfigEntry, GitError, read_config_entries

from .models import ConfigKey
from .protocol import ConfigEnum, ConfigStore

logger = create_logger("config")

_TRUE_VALUES = frozenset({"true", "yes", "on", "1"})
_FALSE_VALUES = frozenset({"false", "no", "off", "0", ""})


def _parse_boolean(raw: str) -> bool | None:
    """Interpret a raw value using git's boolean vocabulary.

    Returns None when the value is not a recognized boolean.
    """
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


class MemoryConfigStore(ConfigStore):
    """Mutable store of already-parsed configuration entries.

    Every key keeps all of its values in insertion order; lookups see the
    last one, matching ``git config --get``. A value of None marks a key
    that was declared without ``=``.
    """

    def __init__(self) -> None:
        self._values: dict[ConfigKey, list[str | None]] = {}

    @classmethod
    def from_entries(cls, entries: Iterable[ConfigEntry]) -> MemoryConfigStore:
        store = cls()
        for dotted, value in entries:
            store.add(ConfigKey.parse(dotted), value)
        return store

    @classmethod
    def from_git(
        cls,
        working_dir: Path | None = None,
        *,
        file: Path | None = None,
    ) -> Result[MemoryConfigStore, GitError]:
        logger.debug(
            "Reading git config",
            working_dir=str(working_dir) if working_dir else None,
            file=str(file) if file else None,
        )
        return (
            read_config_entries(working_dir, file=file)
            .map(cls.from_entries)
            .inspect_err(lambda error: logger.error("Git config read failed", error=error.message))
        )

    def add(self, key: ConfigKey, value: str | None) -> None:
        self._values.setdefault(key, []).append(value)

    def set_string(self, section: str, subsection: str | None, name: str, value: str | None) -> None:
        """Replace every value of the key with a single one."""
        self._values[ConfigKey.of(section, subsection, name)] = [value]

    def unset(self, section: str, subsection: str | None, name: str) -> None:
        self._values.pop(ConfigKey.of(section, subsection, name), None)

    def entries(self) -> Iterator[ConfigEntry]:
        for key, values in self._values.items():
            for value in values:
                yield key.dotted(), value

    def get_string(self, section: str, subsection: str | None, name: str) -> str | None:
        return self._raw(ConfigKey.of(section, subsection, name))[1]

    def get_boolean(self, section: str, name: str, default: bool) -> bool:
        key = ConfigKey.of(section, None, name)
        present, raw = self._raw(key)
        if not present:
            return default
        if raw is None:
            return True

        parsed = _parse_boolean(raw)
        if parsed is None:
            logger.warning("Invalid boolean value, using default", key=key.dotted(), value=raw, default=default)
            return default
        return parsed

    def get_enum[E: ConfigEnum](
        self,
        variants: Iterable[E],
        section: str,
        subsection: str | None,
        name: str,
        default: E,
    ) -> E:
        key = ConfigKey.of(section, subsection, name)
        raw = self._raw(key)[1]
        if raw is None:
            return default

        match = next((variant for variant in variants if variant.matches(raw)), None)
        if match is None:
            logger.debug("Unrecognized value, using default", key=key.dotted(), value=raw, default=default)
            return default
        return match

    def _raw(self, key: ConfigKey) -> tuple[bool, str | None]:
        values = self._values.get(key)
        if not values:
            return False, None
        return True, values[-1]
