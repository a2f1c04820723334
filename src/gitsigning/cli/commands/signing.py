from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
import yaml
from result import is_err

from gitsigning.config import MemoryConfigStore
from gitsigning.signing import SigningConfig
from gitsigning.utils.git import GitConfigReadError, GitError


class OutputFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"


FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (yaml or json)."),
]
WorkingDirOption = Annotated[
    Path | None,
    typer.Option(
        "--working-dir",
        help="Repository directory whose effective git config is read.",
    ),
]
FileOption = Annotated[
    Path | None,
    typer.Option(
        "--file",
        help="Read only this git config file instead of the effective configuration.",
    ),
]


def show(
    format: FormatOption = OutputFormat.YAML,
    working_dir: WorkingDirOption = None,
    file: FileOption = None,
) -> None:
    """Show the resolved signing configuration."""
    selected_format = OutputFormat(format)
    result = MemoryConfigStore.from_git(working_dir, file=file).map(
        lambda store: SigningConfig.from_store(store).model_dump(mode="json")
    )
    if is_err(result):
        _handle_error(result.err())
        raise typer.Exit(code=1)

    typer.echo(_format_payload(result.unwrap(), selected_format))


def _format_payload(payload: dict[str, object], format: OutputFormat) -> str:
    if format is OutputFormat.JSON:
        return json.dumps(payload, indent=2, sort_keys=True)
    return yaml.safe_dump(payload, sort_keys=True)


def _handle_error(error: GitError) -> None:
    message = error.message
    if isinstance(error, GitConfigReadError) and error.file is not None:
        message = f"{message} ({error.file})"

    typer.secho(message, err=True, fg=typer.colors.RED)
