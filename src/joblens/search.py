"""Search engine for finding substring matches in processed log lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from joblens.models import SearchDirection

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.text import Text

    from joblens.models import SearchState


def _plain(line: Text | str) -> str:
    return line if isinstance(line, str) else line.plain


def search(lines: Sequence[Text | str], query: str) -> list[int]:
    """Indices of lines containing the query (case-sensitive), ascending.

    An empty query means search is inactive and matches nothing.
    """
    if not query:
        return []
    return [i for i, line in enumerate(lines) if query in _plain(line)]


def match_spans(plain: str, query: str) -> list[tuple[int, int]]:
    """All (start, end) occurrences of the query in a line, overlapping included."""
    results: list[tuple[int, int]] = []
    pat_len = len(query)
    if pat_len == 0:
        return results
    start = 0
    while True:
        pos = plain.find(query, start)
        if pos == -1:
            break
        results.append((pos, pos + pat_len))
        start = pos + 1
    return results


def advance(matches: Sequence[int], current_index: int | None, direction: SearchDirection) -> int | None:
    """Move the active match with wraparound. Empty matches give None."""
    if not matches:
        return None
    count = len(matches)
    if current_index is None:
        return 0 if direction == SearchDirection.NEXT else count - 1
    step = 1 if direction == SearchDirection.NEXT else -1
    return (current_index + step) % count


def compute_search(state: SearchState, lines: Sequence[Text | str], query: str | None = None) -> SearchState:
    """Recompute matches for a (possibly new) query; the first match becomes active."""
    new_query = state.query if query is None else query
    matches = search(lines, new_query)
    return state.model_copy(
        update={"query": new_query, "matches": matches, "current_index": 0 if matches else None}
    )


def advance_search(state: SearchState, direction: SearchDirection) -> SearchState:
    """Return the state with the active match moved one step."""
    return state.model_copy(update={"current_index": advance(state.matches, state.current_index, direction)})


def offset_for_match(line_index: int, viewport_height: int, *, center: bool = False) -> int:
    """Requested scroll offset that brings a matched line into view.

    Top-aligned by default; the viewport scroller clamps the result.
    """
    if center:
        return max(0, line_index - (max(1, viewport_height) - 1) // 2)
    return max(0, line_index)
