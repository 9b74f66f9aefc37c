"""Popup and search-bar geometry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from joblens.models import Rect

if TYPE_CHECKING:
    from collections.abc import Sequence

SEARCH_BAR_HEIGHT = 3
_MARGIN_BANDS = (0, 2)


def _check_percent(value: int) -> None:
    if not 0 <= value <= 100:  # noqa: PLR2004
        msg = f"Percentage must be within [0, 100], got {value}"
        raise ValueError(msg)


def split_percentages(length: int, percents: Sequence[int]) -> list[int]:
    """Split a length into bands of the given percentages.

    Each band gets floor(length * p / 100). The rounding slack goes to the
    outer margin bands, half each, so a three-band split keeps its middle centered.
    """
    for p in percents:
        _check_percent(p)
    sizes = [length * p // 100 for p in percents]
    slack = max(0, length - sum(sizes))
    if len(sizes) == 3:  # noqa: PLR2004
        first, last = _MARGIN_BANDS
        sizes[first] += slack // 2
        sizes[last] += slack - slack // 2
    elif sizes:
        sizes[-1] += slack
    return sizes


def _three_band(percent: int) -> list[int]:
    margin = (100 - percent) // 2
    return [margin, percent, margin]


def centered_rect(percent_width: int, percent_height: int, container: Rect) -> Rect:
    """A rectangle centered in the container covering the given percentages."""
    _check_percent(percent_width)
    _check_percent(percent_height)
    top, height, _ = split_percentages(container.height, _three_band(percent_height))
    left, width, _ = split_percentages(container.width, _three_band(percent_width))
    return Rect(x=container.x + left, y=container.y + top, width=width, height=height)


def split_for_search(area: Rect, *, search_active: bool) -> tuple[Rect, Rect | None]:
    """Split off a fixed-height search bar at the bottom when search input is open."""
    if not search_active:
        return area, None
    bar_height = min(SEARCH_BAR_HEIGHT, area.height)
    body = area.model_copy(update={"height": area.height - bar_height})
    bar = Rect(x=area.x, y=body.bottom, width=area.width, height=bar_height)
    return body, bar
