"""Models for addressing git-style configuration entries."""

from __future__ import annotations

from dataclasses import dataclass


class InvalidConfigKeyError(ValueError):
    """Raised when a dotted key cannot be split into section and name."""


@dataclass(frozen=True, slots=True)
class ConfigKey:
    """Normalized ``(section, subsection, name)`` address.

    Section and name are case-insensitive and stored lowercased.
    The subsection is case-sensitive and kept verbatim.
    """

    section: str
    subsection: str | None
    name: str

    @classmethod
    def of(cls, section: str, subsection: str | None, name: str) -> ConfigKey:
        return cls(section=section.lower(), subsection=subsection, name=name.lower())

    @classmethod
    def parse(cls, dotted: str) -> ConfigKey:
        """Split a dotted key the way git does.

        The first segment is the section, the last is the name and anything
        in between (which may contain dots) is the subsection.
        """
        section, sep, rest = dotted.partition(".")
        if not sep or not section:
            raise InvalidConfigKeyError(f"Key does not contain a section: {dotted!r}")

        subsection, dot, name = rest.rpartition(".")
        if not name:
            raise InvalidConfigKeyError(f"Key does not contain a variable name: {dotted!r}")

        return cls.of(section, subsection if dot else None, name)

    def dotted(self) -> str:
        if self.subsection is None:
            return f"{self.section}.{self.name}"
        return f"{self.section}.{self.subsection}.{self.name}"
