"""Reading a job log into a raw text blob."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


def read_log(path: Path) -> str:
    """Read a whole job log file. Undecodable bytes are replaced, NUL control bytes kept."""
    return path.read_bytes().decode("utf-8", errors="replace")


def is_pipe() -> bool:
    """Check if stdin is a pipe (not a terminal)."""
    return not sys.stdin.isatty()


def read_stdin() -> str:
    """Read the whole job log from stdin."""
    return sys.stdin.buffer.read().decode("utf-8", errors="replace")
