from __future__ import annotations

import pytest

from gitsigning.signing import SigningFormat


@pytest.mark.parametrize(
    ("variant", "token"),
    [
        (SigningFormat.OPENPGP, "openpgp"),
        (SigningFormat.X509, "x509"),
        (SigningFormat.SSH, "ssh"),
    ],
)
def test_canonical_token(variant: SigningFormat, token: str) -> None:
    assert variant.canonical_token() == token
    assert variant.matches(token)


@pytest.mark.parametrize("raw", ["OpenPGP", "SSH", "X509", " ssh", "ssh ", "op", "", None])
def test_matches_is_exact_and_case_sensitive(raw: str | None) -> None:
    assert not any(variant.matches(raw) for variant in SigningFormat)


def test_each_token_matches_only_its_own_variant() -> None:
    for variant in SigningFormat:
        matching = [other for other in SigningFormat if other.matches(variant.canonical_token())]
        assert matching == [variant]
