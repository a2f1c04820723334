"""Typed snapshot of git's signing-related configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from gitsigning.common import create_logger
from gitsigning.config.protocol import ConfigStore

from .models import SigningFormat

logger = create_logger("signing")

GPG_SECTION = "gpg"
USER_SECTION = "user"
COMMIT_SECTION = "commit"
TAG_SECTION = "tag"
SSH_SUBSECTION = "ssh"

FORMAT_KEY = "format"
PROGRAM_KEY = "program"
SIGNING_KEY_KEY = "signingKey"
GPG_SIGN_KEY = "gpgSign"
FORCE_SIGN_ANNOTATED_KEY = "forceSignAnnotated"
SSH_DEFAULT_KEY_COMMAND_KEY = "defaultKeyCommand"
SSH_ALLOWED_SIGNERS_FILE_KEY = "allowedSignersFile"
SSH_REVOCATION_FILE_KEY = "revocationFile"


class SigningConfig(BaseModel):
    """Signing options resolved once from a configuration store.

    Instances hold plain values only. Changing the store afterwards does not
    affect an existing snapshot; build a new one with ``from_store`` instead.

    Attributes:
        key_format: Value of ``gpg.format``; OpenPGP when unset or unrecognized.
        signing_key: Value of ``user.signingKey``.
        program: Signing program for ``key_format``, from
            ``gpg.<format>.program`` or, for OpenPGP only, ``gpg.program``.
        sign_commits: Value of ``commit.gpgSign``.
        sign_all_tags: Value of ``tag.gpgSign``.
        force_annotated: Value of ``tag.forceSignAnnotated``.
        ssh_default_key_command: Value of ``gpg.ssh.defaultKeyCommand``.
        ssh_allowed_signers_file: Value of ``gpg.ssh.allowedSignersFile``.
        ssh_revocation_file: Value of ``gpg.ssh.revocationFile``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    key_format: SigningFormat = SigningFormat.OPENPGP
    signing_key: str | None = None
    program: str | None = None
    sign_commits: bool = False
    sign_all_tags: bool = False
    force_annotated: bool = False
    ssh_default_key_command: str | None = None
    ssh_allowed_signers_file: str | None = None
    ssh_revocation_file: str | None = None

    @classmethod
    def from_store(cls, store: ConfigStore) -> SigningConfig:
        key_format = store.get_enum(SigningFormat, GPG_SECTION, None, FORMAT_KEY, SigningFormat.OPENPGP)

        config = cls(
            key_format=key_format,
            signing_key=store.get_string(USER_SECTION, None, SIGNING_KEY_KEY),
            program=_resolve_program(store, key_format),
            sign_commits=store.get_boolean(COMMIT_SECTION, GPG_SIGN_KEY, False),
            sign_all_tags=store.get_boolean(TAG_SECTION, GPG_SIGN_KEY, False),
            force_annotated=store.get_boolean(TAG_SECTION, FORCE_SIGN_ANNOTATED_KEY, False),
            ssh_default_key_command=store.get_string(GPG_SECTION, SSH_SUBSECTION, SSH_DEFAULT_KEY_COMMAND_KEY),
            ssh_allowed_signers_file=store.get_string(GPG_SECTION, SSH_SUBSECTION, SSH_ALLOWED_SIGNERS_FILE_KEY),
            ssh_revocation_file=store.get_string(GPG_SECTION, SSH_SUBSECTION, SSH_REVOCATION_FILE_KEY),
        )
        logger.debug("Signing config resolved", **config.model_dump(mode="json"))
        return config


def _resolve_program(store: ConfigStore, key_format: SigningFormat) -> str | None:
    program = store.get_string(GPG_SECTION, key_format.canonical_token(), PROGRAM_KEY)
    # Unscoped gpg.program predates gpg.format and only ever meant OpenPGP
    if program is None and key_format is SigningFormat.OPENPGP:
        program = store.get_string(GPG_SECTION, None, PROGRAM_KEY)
    return program
