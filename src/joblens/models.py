"""Pydantic models for joblens."""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from joblens.viewport import position_indicator, visible_range


class TimestampMode(StrEnum):
    """How a leading timestamp is displayed."""

    HIDDEN = "hidden"
    DATE = "date"
    FULL = "full"

    def next(self) -> TimestampMode:
        """Cycle Hidden -> Date -> Full -> Hidden."""
        order = list(TimestampMode)
        return order[(order.index(self) + 1) % len(order)]

    @property
    def label(self) -> str:
        """Title bar indicator for this mode."""
        return _TIMESTAMP_LABELS[self]


_TIMESTAMP_LABELS: dict[TimestampMode, str] = {
    TimestampMode.HIDDEN: "[Timestamps: Hidden]",
    TimestampMode.DATE: "[Timestamps: Date]",
    TimestampMode.FULL: "[Timestamps: Full]",
}


class SearchDirection(StrEnum):
    """Direction for match navigation."""

    NEXT = "next"
    PREV = "prev"


class Rect(BaseModel):
    """A rectangle in character cells."""

    model_config = ConfigDict(frozen=True)

    x: int = Field(default=0, ge=0)
    y: int = Field(default=0, ge=0)
    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def inner(self) -> Rect:
        """Area left inside a one-cell border."""
        return Rect(
            x=self.x + 1 if self.width else self.x,
            y=self.y + 1 if self.height else self.y,
            width=max(0, self.width - 2),
            height=max(0, self.height - 2),
        )


class ScrollState(BaseModel):
    """Caller-owned scroll position. The offset is clamped on every use, never trusted."""

    offset: int = Field(default=0, ge=0)
    viewport_height: int = Field(default=1, ge=1)

    def visible_range(self, total_lines: int) -> tuple[int, int]:
        """(start, end) of the lines shown for this position."""
        return visible_range(total_lines, self.viewport_height, self.offset)

    def position(self, total_lines: int) -> tuple[int, int] | None:
        """1-based (current, last) indicator, None when everything fits."""
        return position_indicator(total_lines, self.viewport_height, self.offset)


class SearchState(BaseModel):
    """Search query, matching line indices and the active match."""

    query: str = ""
    matches: list[int] = []
    current_index: int | None = None
    active: bool = False

    @model_validator(mode="after")
    def _check_current_index(self) -> Self:
        if not self.matches:
            if self.current_index is not None:
                msg = "current_index must be None when there are no matches"
                raise ValueError(msg)
        elif self.current_index is None:
            msg = "current_index is required when there are matches"
            raise ValueError(msg)
        elif not 0 <= self.current_index < len(self.matches):
            msg = f"current_index {self.current_index} out of range for {len(self.matches)} matches"
            raise ValueError(msg)
        return self

    @property
    def current_line(self) -> int | None:
        """Line index of the active match, if any."""
        if self.current_index is None:
            return None
        return self.matches[self.current_index]


class LogViewState(BaseModel):
    """Everything the caller owns and passes to a render call."""

    job_name: str | None = None
    content: str | None = None
    timestamp_mode: TimestampMode = TimestampMode.FULL
    scroll_offset: int = Field(default=0, ge=0)
    search: SearchState = Field(default_factory=SearchState)


class AppConfig(BaseModel):
    """Application configuration persisted to disk."""

    theme: str = "textual-dark"
    timestamp_mode: TimestampMode = TimestampMode.FULL
    popup_percent: int = Field(default=90, ge=10, le=100)
    center_matches: bool = False
