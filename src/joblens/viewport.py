"""Viewport windowing arithmetic. Offsets are always clamped, never trusted."""

from __future__ import annotations


def max_offset(total_lines: int, viewport_height: int) -> int:
    """Largest offset that still fills the viewport."""
    return max(0, total_lines - max(1, viewport_height))


def clamp_offset(total_lines: int, viewport_height: int, requested_offset: int) -> int:
    """Clamp a requested offset into [0, max_offset]."""
    return min(max(0, requested_offset), max_offset(total_lines, viewport_height))


def visible_range(total_lines: int, viewport_height: int, requested_offset: int) -> tuple[int, int]:
    """Compute the (start, end) slice of lines shown in the viewport.

    An empty log yields (0, 0); the caller substitutes a placeholder line.
    """
    if total_lines <= 0:
        return 0, 0
    height = max(1, viewport_height)
    start = clamp_offset(total_lines, height, requested_offset)
    return start, min(start + height, total_lines)


def position_indicator(total_lines: int, viewport_height: int, requested_offset: int) -> tuple[int, int] | None:
    """1-based (current, last) scroll position, or None when everything fits."""
    if total_lines <= max(1, viewport_height):
        return None
    return (
        clamp_offset(total_lines, viewport_height, requested_offset) + 1,
        max_offset(total_lines, viewport_height) + 1,
    )


def scroll_by(offset: int, delta: int, total_lines: int, viewport_height: int) -> int:
    """Move by delta lines (negative scrolls up). Page moves pass +/- viewport_height."""
    return clamp_offset(total_lines, viewport_height, clamp_offset(total_lines, viewport_height, offset) + delta)


def scroll_to_top() -> int:
    return 0


def scroll_to_bottom(total_lines: int, viewport_height: int) -> int:
    return max_offset(total_lines, viewport_height)
