"""Composition of the log pipeline into one renderable frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from joblens.colors import (
    EMPTY_FRAME_STYLE,
    SEARCH_BAR_BORDER_STYLE,
    SEARCH_CARET_STYLE,
    SEARCH_QUERY_STYLE,
    search_current_style,
    search_match_style,
)
from joblens.layout import centered_rect, split_for_search
from joblens.models import ScrollState
from joblens.search import match_spans, offset_for_match, search
from joblens.styling import process_log, split_log_lines
from joblens.viewport import clamp_offset

if TYPE_CHECKING:
    from rich.console import RenderableType

    from joblens.models import LogViewState, Rect, SearchState

DEFAULT_POPUP_PERCENT = 90
NO_LOG_TITLE = "Job Log"
DEFAULT_JOB_NAME = "Unknown Job"
EMPTY_LOG_PLACEHOLDER = "(empty log)"
TITLE_HINTS = "(q/Esc close, / search, n/N next/prev, t time)"
SEARCH_PROMPT = "Search: "
SEARCH_CARET = "█"
SEARCH_BAR_TITLE = " Enter to search, Esc to cancel "


@dataclass(slots=True)
class RenderedLog:
    """One rendered frame: geometry, title, visible styled lines, optional search bar."""

    area: Rect
    body: Rect
    title: str
    lines: list[Text] = field(default_factory=list)
    search_bar: Rect | None = None
    search_line: Text | None = None
    loaded: bool = True
    total_lines: int = 0
    start: int = 0
    matches: list[int] = field(default_factory=list)
    current_index: int | None = None

    @property
    def plain_lines(self) -> list[str]:
        return [line.plain for line in self.lines]

    def to_renderable(self) -> RenderableType:
        """Bordered panels for painting; the caller positions them at `area`."""
        if not self.loaded:
            return Panel(
                Text(), title=Text(self.title), style=EMPTY_FRAME_STYLE, width=self.area.width, height=self.area.height
            )
        body = Panel(
            Text("\n").join(self.lines),
            title=Text(self.title),
            title_align="left",
            width=self.body.width,
            height=self.body.height,
        )
        if self.search_bar is None or self.search_line is None:
            return body
        bar = Panel(
            self.search_line,
            title=Text(SEARCH_BAR_TITLE),
            title_align="left",
            border_style=SEARCH_BAR_BORDER_STYLE,
            width=self.search_bar.width,
            height=self.search_bar.height,
        )
        return Group(body, bar)


def viewport_height(body: Rect) -> int:
    """Rows available for log lines inside a bordered body, at least one."""
    return max(1, body.inner().height)


def content_height(area: Rect, *, search_active: bool, percent: int = DEFAULT_POPUP_PERCENT) -> int:
    """Viewport height a render call on `area` would use."""
    body, _ = split_for_search(centered_rect(percent, percent, area), search_active=search_active)
    return viewport_height(body)


def line_count(state: LogViewState) -> int:
    """Number of display lines in the state's log content."""
    return len(split_log_lines(state.content or ""))


def _current_index(search_state: SearchState, matches: list[int]) -> int | None:
    if not matches:
        return None
    if search_state.current_index is None:
        return 0
    return min(search_state.current_index, len(matches) - 1)


def _search_indicator(search_state: SearchState, matches: list[int], current: int | None) -> str:
    if matches and current is not None:
        return f" [Match {current + 1}/{len(matches)}]"
    if search_state.query and not search_state.active:
        return " [No matches]"
    return ""


def _highlight(line: Text, query: str, *, active: bool) -> Text:
    highlighted = line.copy()
    style = search_current_style() if active else search_match_style()
    for start, end in match_spans(highlighted.plain, query):
        highlighted.stylize(style, start, end)
    return highlighted


def build_title(
    job_name: str | None,
    scroll: tuple[int, int] | None,
    timestamp_label: str,
    search_indicator: str,
) -> str:
    """Title bar text: job, scroll position, timestamp mode, search status, key hints."""
    scroll_text = f" [{scroll[0]}/{scroll[1]}] " if scroll is not None else " "
    job = job_name or DEFAULT_JOB_NAME
    return f"Job Log: {job}{scroll_text}{timestamp_label}{search_indicator} {TITLE_HINTS}"


def build_search_line(query: str) -> Text:
    return Text.assemble(SEARCH_PROMPT, (query, SEARCH_QUERY_STYLE), (SEARCH_CARET, SEARCH_CARET_STYLE))


def render_log(state: LogViewState, area: Rect, *, percent: int = DEFAULT_POPUP_PERCENT) -> RenderedLog:
    """Render the log popup for the given view state.

    Everything is recomputed from the raw content: processed lines, matches,
    the clamped visible slice, and the title. Nothing is kept between calls.
    """
    popup = centered_rect(percent, percent, area)
    if state.content is None:
        return RenderedLog(area=popup, body=popup, title=NO_LOG_TITLE, loaded=False)

    body, bar = split_for_search(popup, search_active=state.search.active)
    height = viewport_height(body)

    processed = process_log(state.content, state.timestamp_mode)
    total = len(processed)
    query = state.search.query
    matches = search(processed, query)
    current = _current_index(state.search, matches)
    current_line = matches[current] if current is not None else None

    scroll = ScrollState(offset=state.scroll_offset, viewport_height=height)
    start, end = scroll.visible_range(total)
    if total == 0:
        visible = [Text(EMPTY_LOG_PLACEHOLDER)]
    else:
        matched = set(matches)
        visible = [
            _highlight(processed[i], query, active=i == current_line) if i in matched else processed[i]
            for i in range(start, end)
        ]

    title = build_title(
        state.job_name,
        scroll.position(total),
        state.timestamp_mode.label,
        _search_indicator(state.search, matches, current),
    )
    return RenderedLog(
        area=popup,
        body=body,
        title=title,
        lines=visible,
        search_bar=bar,
        search_line=build_search_line(query) if bar is not None else None,
        total_lines=total,
        start=start,
        matches=matches,
        current_index=current,
    )


def scroll_to_current_match(state: LogViewState, height: int, *, center: bool = False) -> int:
    """Scroll offset that brings the active match into view, clamped.

    Without an active match the current offset is returned, clamped.
    """
    total = line_count(state)
    target = state.scroll_offset
    current_line = state.search.current_line
    if current_line is not None:
        target = offset_for_match(current_line, height, center=center)
    return clamp_offset(total, height, target)
