"""View command - browse a job log in the interactive viewer."""

from __future__ import annotations

import os
import sys
from pathlib import Path  # noqa: TC003 - typer needs this at runtime for argument parsing
from typing import Annotated

import typer

from joblens.models import TimestampMode
from joblens.reader import is_pipe, read_log, read_stdin


def _reattach_tty() -> None:
    """Point fd 0 at /dev/tty after draining piped stdin, so Textual gets keyboard input."""
    tty_fd = os.open("/dev/tty", os.O_RDONLY)
    os.dup2(tty_fd, sys.stdin.fileno())
    os.close(tty_fd)
    sys.stdin = os.fdopen(0)


def load_content(file: Path | None) -> str:
    """Read the log from a file or piped stdin, exiting with an error otherwise."""
    if file is not None:
        if not file.is_file():
            typer.echo(f"Error: {file} is not a file")
            raise typer.Exit(1)
        try:
            return read_log(file)
        except OSError as e:
            typer.echo(f"Error: cannot read {file}: {e}")
            raise typer.Exit(1) from e
    if is_pipe():
        return read_stdin()
    typer.echo("Error: provide a file or pipe input")
    raise typer.Exit(1)


def view(
    file: Annotated[Path | None, typer.Argument(help="Job log file to view (default: stdin)")] = None,
    job_name: Annotated[str | None, typer.Option("--job-name", "-j", help="Job name shown in the title")] = None,
    timestamps: Annotated[
        TimestampMode | None, typer.Option("--timestamps", "-t", help="Timestamp display mode")
    ] = None,
) -> None:
    """View a CI job log in a terminal UI."""
    content = load_content(file)
    if file is None:
        _reattach_tty()

    from joblens.app import JobLogApp  # noqa: PLC0415

    log_app = JobLogApp(
        content=content,
        job_name=job_name or (file.name if file is not None else None),
        timestamp_mode=timestamps,
    )
    log_app.run(mouse=False)
