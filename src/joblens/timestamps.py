"""Leading timestamp detection and re-rendering per display mode."""

from __future__ import annotations

import re

from joblens.models import TimestampMode
from joblens.normalize import normalize

# "2024-01-15T10:30:45.123Z ", "2024-01-15T10:30:45+00:00 ". Trailing whitespace is required.
_TIMESTAMP_RE = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})T(?P<time>\d{2}:\d{2}:\d{2})(?:\.\d+)?(?:Z|[+-]\d{2}:\d{2})?\s+"
)


def split_timestamp(line: str) -> tuple[str, str, str] | None:
    """Split a line into (date, time, rest) if it starts with a timestamp."""
    m = _TIMESTAMP_RE.match(line)
    if m is None:
        return None
    return m.group("date"), m.group("time"), line[m.end() :]


def format_timestamp(line: str, mode: TimestampMode) -> str:
    """Re-render the leading timestamp of an already-normalized line.

    Hidden drops it, Date keeps only the date, Full keeps date and time of day.
    Fractional seconds and timezone are dropped in every mode. Lines without a
    recognizable timestamp are returned unchanged.
    """
    parts = split_timestamp(line)
    if parts is None:
        return line
    date, time, rest = parts
    match mode:
        case TimestampMode.HIDDEN:
            return rest
        case TimestampMode.DATE:
            return f"{date} {rest}"
        case TimestampMode.FULL:
            return f"{date} {time} {rest}"


def process_line(line: str, mode: TimestampMode) -> str:
    """Normalize a raw line, then format its timestamp."""
    return format_timestamp(normalize(line), mode)
