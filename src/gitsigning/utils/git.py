"""Git utility functions."""

from __future__ import annotations

import subprocess
from pathlib import Path

from pydantic import BaseModel
from result import Err, Ok, Result

type ConfigEntry = tuple[str, str | None]


class GitError(BaseModel):
    """Base error for git operations."""

    message: str


class GitNotInstalledError(GitError):
    """Git command not found."""

    pass


class GitConfigReadError(GitError):
    """Failed to list git configuration."""

    working_dir: Path | None = None
    file: Path | None = None


def read_config_entries(
    working_dir: Path | None = None,
    *,
    file: Path | None = None,
) -> Result[list[ConfigEntry], GitError]:
    """List effective git configuration as ``(dotted_key, value)`` pairs.

    Git itself resolves the system/global/local/worktree layering and
    includes. When ``file`` is given only that file is read. Bytes that are
    not valid UTF-8 are decoded as U+FFFD.
    """
    if working_dir is not None and not working_dir.is_dir():
        return Err(
            GitConfigReadError(
                working_dir=working_dir,
                file=file,
                message=f"Working directory does not exist or is not a directory: {working_dir}",
            )
        )

    command = ["git", "config", "--list", "-z"]
    if file is not None:
        command[2:2] = ["--file", str(file)]

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=True,
            cwd=working_dir,
        )
    except FileNotFoundError:
        return Err(GitNotInstalledError(message="git command not found. Please install git."))
    except subprocess.CalledProcessError as e:
        # git exits with 1 when there is simply nothing to list
        if e.returncode == 1 and not (e.stdout or "").strip("\0") and not (e.stderr or "").strip():
            return Ok([])
        stderr = e.stderr.strip() if e.stderr else "Unknown error"
        return Err(
            GitConfigReadError(
                working_dir=working_dir,
                file=file,
                message=f"Failed to read git config: {stderr}",
            )
        )
    except OSError as e:
        return Err(
            GitConfigReadError(
                working_dir=working_dir,
                file=file,
                message=f"Unexpected error reading git config: {e}",
            )
        )

    return Ok(parse_config_listing(result.stdout))


def parse_config_listing(output: str) -> list[ConfigEntry]:
    """Parse the output of ``git config --list -z``.

    Each record is NUL-terminated; key and value are separated by the first
    newline. A record without a newline is a key that has no value at all.
    """
    entries: list[ConfigEntry] = []
    for record in output.split("\0"):
        if not record:
            continue
        key, sep, value = record.partition("\n")
        entries.append((key, value if sep else None))
    return entries
