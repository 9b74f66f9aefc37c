"""Styles for search highlights, title, and search bar."""

from __future__ import annotations

from rich.style import Style

# (inactive, active) match backgrounds. White text on tinted amber.
_MATCH_BACKGROUNDS: tuple[str, str] = ("#6e5600", "#9e7c00")

SEARCH_QUERY_STYLE = Style(color="yellow", bold=True)
SEARCH_CARET_STYLE = Style(color="white", blink=True)
SEARCH_BAR_BORDER_STYLE = Style(color="cyan")
EMPTY_FRAME_STYLE = Style(color="white")


def search_match_style() -> Style:
    """Highlight for matches other than the active one."""
    return Style(bgcolor=_MATCH_BACKGROUNDS[0], color="#ffffff")


def search_current_style() -> Style:
    """Highlight for occurrences on the active match line (brighter + bold)."""
    return Style(bgcolor=_MATCH_BACKGROUNDS[1], color="#ffffff", bold=True)
