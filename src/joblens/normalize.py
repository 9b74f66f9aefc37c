"""Stripping of CI log control prefixes and section markers."""

from __future__ import annotations

_PREFIX_LEN = 3
_NUL = "\x00"
# Third character accepted after a literal "00" prefix. Heuristic: ordinary text
# such as "00a..." also matches and loses its first three characters.
_CONTROL_CODE_CHARS = frozenset("EO0123456789ABCDEFabcdef")
_SECTION_MARKERS = ("section_start:", "section_end:")


def strip_prefix(line: str) -> str:
    """Strip a 3-character control prefix (NUL + code, or "00" + code) from the line start."""
    if len(line) < _PREFIX_LEN:
        return line
    if line.startswith(_NUL):
        return line[_PREFIX_LEN:]
    if line.startswith("00") and line[2] in _CONTROL_CODE_CHARS:
        return line[_PREFIX_LEN:]
    return line


def is_section_marker(line: str) -> bool:
    """Whether the line opens or closes a collapsible section."""
    return line.startswith(_SECTION_MARKERS)


def normalize(line: str) -> str:
    """Strip control prefixes and blank out collapsible-section marker lines."""
    stripped = strip_prefix(line)
    if is_section_marker(stripped):
        return ""
    return stripped
