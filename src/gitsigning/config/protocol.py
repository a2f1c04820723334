"""Configuration access protocols."""

from collections.abc import Iterable
from typing import Protocol


class ConfigEnum(Protocol):
    """Enum variant that can be matched against a raw configuration value."""

    def matches(self, raw: str | None) -> bool: ...

    def canonical_token(self) -> str: ...


class ConfigStore(Protocol):
    """Read access to a git-style ``section.subsection.name`` configuration."""

    def get_string(self, section: str, subsection: str | None, name: str) -> str | None:
        """Return the last value set for the key, or None when unset."""
        ...

    def get_boolean(self, section: str, name: str, default: bool) -> bool:
        """Return the key as a boolean, or ``default`` when unset or unparseable."""
        ...

    def get_enum[E: ConfigEnum](
        self,
        variants: Iterable[E],
        section: str,
        subsection: str | None,
        name: str,
        default: E,
    ) -> E:
        """Return the first variant matching the raw value, or ``default``."""
        ...
