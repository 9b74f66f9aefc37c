"""Render command - print a single frame of the viewer without a TUI."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003 - typer needs this at runtime for argument parsing
from typing import Annotated

import typer
from rich.console import Console

from joblens.commands.view import load_content
from joblens.config import load_config
from joblens.models import LogViewState, Rect, SearchState, TimestampMode
from joblens.render import content_height, render_log, scroll_to_current_match
from joblens.search import compute_search
from joblens.styling import process_log


def render(
    file: Annotated[Path | None, typer.Argument(help="Job log file to render (default: stdin)")] = None,
    job_name: Annotated[str | None, typer.Option("--job-name", "-j", help="Job name shown in the title")] = None,
    timestamps: Annotated[
        TimestampMode | None, typer.Option("--timestamps", "-t", help="Timestamp display mode")
    ] = None,
    width: Annotated[int, typer.Option("--width", "-W", min=1, help="Frame width in cells")] = 120,
    height: Annotated[int, typer.Option("--height", "-H", min=1, help="Frame height in rows")] = 40,
    offset: Annotated[int, typer.Option("--offset", "-o", min=0, help="Requested scroll offset")] = 0,
    query: Annotated[
        str | None, typer.Option("--query", "-q", help="Search text; scrolls to the first match")
    ] = None,
    plain: Annotated[bool, typer.Option("--plain", help="Print visible lines only, no borders or color")] = False,  # noqa: FBT002
) -> None:
    """Render one frame of a job log and print it."""
    config = load_config()
    content = load_content(file)
    mode = timestamps or config.timestamp_mode
    area = Rect(width=width, height=height)

    state = LogViewState(
        job_name=job_name or (file.name if file is not None else None),
        content=content,
        timestamp_mode=mode,
        scroll_offset=offset,
    )
    if query:
        search = compute_search(SearchState(), process_log(content, mode), query)
        state = state.model_copy(update={"search": search})
        viewport = content_height(area, search_active=False, percent=config.popup_percent)
        state = state.model_copy(
            update={"scroll_offset": scroll_to_current_match(state, viewport, center=config.center_matches)}
        )

    frame = render_log(state, area, percent=config.popup_percent)
    if plain:
        typer.echo(frame.title)
        for line in frame.plain_lines:
            typer.echo(line)
        return

    console = Console(width=frame.area.width, height=height)
    console.print(frame.to_renderable())
