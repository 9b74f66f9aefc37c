"""Tests for timestamp detection and formatting."""

from __future__ import annotations

import pytest

from joblens.models import TimestampMode
from joblens.timestamps import format_timestamp, process_line, split_timestamp

LINE = "2024-01-15T10:30:45.123Z hello"


class TestFormatTimestamp:
    def test_hidden(self) -> None:
        assert format_timestamp(LINE, TimestampMode.HIDDEN) == "hello"

    def test_date_only(self) -> None:
        assert format_timestamp(LINE, TimestampMode.DATE) == "2024-01-15 hello"

    def test_full(self) -> None:
        assert format_timestamp(LINE, TimestampMode.FULL) == "2024-01-15 10:30:45 hello"

    def test_offset_timezone(self) -> None:
        line = "2024-01-15T10:30:45+02:00 deploy"
        assert format_timestamp(line, TimestampMode.FULL) == "2024-01-15 10:30:45 deploy"

    def test_negative_offset_no_fraction(self) -> None:
        line = "2024-01-15T10:30:45-05:00 deploy"
        assert format_timestamp(line, TimestampMode.DATE) == "2024-01-15 deploy"

    def test_no_timezone(self) -> None:
        assert format_timestamp("2024-01-15T10:30:45 text", TimestampMode.HIDDEN) == "text"

    def test_multiple_whitespace_consumed(self) -> None:
        assert format_timestamp("2024-01-15T10:30:45Z \t  text", TimestampMode.HIDDEN) == "text"

    def test_remainder_unchanged(self) -> None:
        line = "2024-01-15T10:30:45Z   2024-01-16T00:00:00Z nested"
        assert format_timestamp(line, TimestampMode.HIDDEN) == "2024-01-16T00:00:00Z nested"

    @pytest.mark.parametrize("mode", list(TimestampMode))
    def test_trailing_whitespace_required(self, mode: TimestampMode) -> None:
        line = "2024-01-15T10:30:45.123Z"
        assert format_timestamp(line, mode) == line

    @pytest.mark.parametrize("mode", list(TimestampMode))
    def test_timestamp_then_space_only(self, mode: TimestampMode) -> None:
        expected = {TimestampMode.HIDDEN: "", TimestampMode.DATE: "2024-01-15 ", TimestampMode.FULL: "2024-01-15 10:30:45 "}
        assert format_timestamp("2024-01-15T10:30:45Z ", mode) == expected[mode]

    @pytest.mark.parametrize("mode", list(TimestampMode))
    @pytest.mark.parametrize(
        "line",
        [
            "plain text",
            "",
            "2024-01-15 10:30:45 space-separated",
            "Jan 15 10:30:45 syslog",
            "  2024-01-15T10:30:45Z indented",
            "2024-1-15T10:30:45Z short",
        ],
    )
    def test_identity_without_timestamp(self, line: str, mode: TimestampMode) -> None:
        assert format_timestamp(line, mode) == line


class TestSplitTimestamp:
    def test_parts(self) -> None:
        assert split_timestamp(LINE) == ("2024-01-15", "10:30:45", "hello")

    def test_no_match(self) -> None:
        assert split_timestamp("hello") is None


class TestProcessLine:
    def test_prefix_then_timestamp(self) -> None:
        assert process_line("00O2024-01-15T10:30:45.123Z hello", TimestampMode.HIDDEN) == "hello"

    def test_section_marker(self) -> None:
        assert process_line("section_start:1:step", TimestampMode.FULL) == ""

    def test_timestamp_before_prefix_keeps_prefix(self) -> None:
        assert process_line("2024-01-15T10:30:45Z 00Ohello", TimestampMode.HIDDEN) == "00Ohello"
