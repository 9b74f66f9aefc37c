"""CLI entry point for joblens."""

from __future__ import annotations

import logging
from typing import Annotated

import typer

from joblens.commands.snapshot import render
from joblens.commands.view import view

app = typer.Typer(add_completion=False)
app.command()(view)
app.command()(render)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,  # noqa: FBT002
) -> None:
    """Terminal viewer for CI job logs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Entry point for the CLI."""
    app()
