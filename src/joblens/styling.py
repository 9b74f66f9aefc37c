"""ANSI escape sequence interpretation into styled rich Text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.ansi import AnsiDecoder
from rich.console import Console
from rich.style import Style
from rich.text import Text

from joblens.timestamps import process_line

if TYPE_CHECKING:
    from joblens.models import TimestampMode

logger = logging.getLogger(__name__)

_span_console = Console(width=500, no_color=False, color_system="truecolor")


def parse_styled(line: str) -> Text:
    """Decode ANSI styling in a single line.

    Only the first decoded line is kept. A fresh decoder is used per line so an
    unterminated style never bleeds into the next one. If the decoder fails, the
    raw text is returned unstyled so a bad line never breaks the render.
    """
    try:
        decoded = next(iter(AnsiDecoder().decode(line)), None)
    except Exception:  # noqa: BLE001 - any decoder failure degrades to raw text
        logger.debug("ANSI decode failed, showing raw text: %r", line, exc_info=True)
        return Text(line)
    return decoded if decoded is not None else Text()


def line_spans(text: Text) -> list[tuple[str, Style]]:
    """Ordered (fragment, style) pairs for a processed line, at least one."""
    spans = [(seg.text, seg.style or Style()) for seg in text.render(_span_console) if seg.text]
    return spans or [(text.plain, Style())]


def split_log_lines(content: str) -> list[str]:
    """Split raw log text on newlines, dropping one trailing carriage return per line."""
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def process_log(content: str, mode: TimestampMode) -> list[Text]:
    """Run the whole line pipeline over a raw log blob."""
    return [parse_styled(process_line(line, mode)) for line in split_log_lines(content)]
