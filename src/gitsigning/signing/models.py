"""Signing format enumeration."""

from __future__ import annotations

from enum import Enum


class SigningFormat(str, Enum):
    """Values accepted for ``gpg.format``."""

    OPENPGP = "openpgp"
    X509 = "x509"
    SSH = "ssh"

    def matches(self, raw: str | None) -> bool:
        """Exact, case-sensitive comparison against the canonical token."""
        return raw == self.value

    def canonical_token(self) -> str:
        return self.value
