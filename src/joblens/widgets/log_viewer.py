"""Job log popup widget: key handling around the pure render pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from rich.padding import Padding
from textual.binding import Binding, BindingType
from textual.message import Message
from textual.widget import Widget

from joblens.models import LogViewState, Rect, SearchDirection, SearchState, TimestampMode
from joblens.render import DEFAULT_POPUP_PERCENT, content_height, line_count, render_log, scroll_to_current_match
from joblens.search import advance_search, compute_search
from joblens.styling import process_log
from joblens.viewport import scroll_by, scroll_to_bottom, scroll_to_top

if TYPE_CHECKING:
    from rich.console import RenderableType
    from textual.events import Key


class JobLogView(Widget, can_focus=True):
    """Centered job log popup with scrolling, search and timestamp modes.

    All view state lives in a LogViewState; every paint renders it from scratch.
    """

    DEFAULT_CSS = """
    JobLogView {
        height: 1fr;
        width: 1fr;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("up,k", "scroll_lines(-1)", "Up", show=False),
        Binding("down,j", "scroll_lines(1)", "Down", show=False),
        Binding("pageup", "scroll_page(-1)", "Page Up", show=False),
        Binding("pagedown", "scroll_page(1)", "Page Down", show=False),
        Binding("home,g", "scroll_home", "Top", show=False),
        Binding("end,G", "scroll_end", "Bottom", show=False),
        Binding("slash", "open_search", "Search"),
        Binding("n", "next_match", "Next", show=False),
        Binding("N", "prev_match", "Prev", show=False),
        Binding("t", "cycle_timestamps", "Time"),
        Binding("q,escape", "close", "Close"),
    ]

    class Closed(Message):
        """Posted when the user closes the viewer."""

        def __init__(self, state: LogViewState) -> None:
            super().__init__()
            self.state = state

    def __init__(
        self,
        state: LogViewState | None = None,
        *,
        percent: int = DEFAULT_POPUP_PERCENT,
        center_matches: bool = False,
        id: str | None = None,  # noqa: A002
    ) -> None:
        super().__init__(id=id)
        self._state = state or LogViewState()
        self._percent = percent
        self._center_matches = center_matches

    @property
    def state(self) -> LogViewState:
        return self._state

    def set_state(self, state: LogViewState) -> None:
        """Replace the view state and repaint."""
        self._state = state
        self.refresh()

    def set_content(self, content: str | None, job_name: str | None = None) -> None:
        """Load new log text, resetting scroll and search."""
        self.set_state(
            self._state.model_copy(
                update={"content": content, "job_name": job_name, "scroll_offset": 0, "search": SearchState()}
            )
        )

    def _area(self) -> Rect:
        return Rect(width=self.size.width, height=self.size.height)

    def _viewport_height(self) -> int:
        return content_height(self._area(), search_active=self._state.search.active, percent=self._percent)

    def _update(self, **changes: object) -> None:
        self.set_state(self._state.model_copy(update=changes))

    def render(self) -> RenderableType:
        frame = render_log(self._state, self._area(), percent=self._percent)
        return Padding(frame.to_renderable(), (frame.area.y, 0, 0, frame.area.x))

    # --- Search input ---

    def on_key(self, event: Key) -> None:
        """While the search bar is open, keys edit the query instead of triggering bindings."""
        search = self._state.search
        if not search.active:
            return
        event.prevent_default()
        event.stop()
        if event.key == "escape":
            self._update(search=SearchState())
        elif event.key == "enter":
            self._run_search()
        elif event.key == "backspace":
            self._update(search=search.model_copy(update={"query": search.query[:-1]}))
        elif event.is_printable and event.character:
            self._update(search=search.model_copy(update={"query": search.query + event.character}))

    def _run_search(self) -> None:
        processed = process_log(self._state.content or "", self._state.timestamp_mode)
        search = compute_search(self._state.search, processed).model_copy(update={"active": False})
        self._update(search=search)
        self._jump_to_current_match()

    def _jump_to_current_match(self) -> None:
        offset = scroll_to_current_match(self._state, self._viewport_height(), center=self._center_matches)
        self._update(scroll_offset=offset)

    # --- Actions ---

    def action_scroll_lines(self, delta: int) -> None:
        total = line_count(self._state)
        self._update(scroll_offset=scroll_by(self._state.scroll_offset, delta, total, self._viewport_height()))

    def action_scroll_page(self, pages: int) -> None:
        self.action_scroll_lines(pages * self._viewport_height())

    def action_scroll_home(self) -> None:
        self._update(scroll_offset=scroll_to_top())

    def action_scroll_end(self) -> None:
        self._update(scroll_offset=scroll_to_bottom(line_count(self._state), self._viewport_height()))

    def action_open_search(self) -> None:
        if self._state.content is None:
            return
        self._update(search=SearchState(active=True))

    def action_next_match(self) -> None:
        self._navigate(SearchDirection.NEXT)

    def action_prev_match(self) -> None:
        self._navigate(SearchDirection.PREV)

    def _navigate(self, direction: SearchDirection) -> None:
        if not self._state.search.matches:
            return
        self._update(search=advance_search(self._state.search, direction))
        self._jump_to_current_match()

    def action_cycle_timestamps(self) -> None:
        mode: TimestampMode = self._state.timestamp_mode.next()
        self._update(timestamp_mode=mode)
        if self._state.search.query:
            processed = process_log(self._state.content or "", mode)
            self._update(search=compute_search(self._state.search, processed))

    def action_close(self) -> None:
        self.post_message(self.Closed(self._state))
