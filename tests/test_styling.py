"""Tests for ANSI style parsing and the line pipeline."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

import pytest
from rich.ansi import AnsiDecoder
from rich.style import Style
from rich.text import Text

from joblens.models import TimestampMode
from joblens.styling import line_spans, parse_styled, process_log, split_log_lines

if TYPE_CHECKING:
    from collections.abc import Iterator


class TestParseStyled:
    def test_plain_text(self) -> None:
        text = parse_styled("hello world")
        assert text.plain == "hello world"
        assert text.spans == []

    def test_color_and_bold(self) -> None:
        text = parse_styled("\x1b[32;1mJob succeeded\x1b[0;m")
        assert text.plain == "Job succeeded"
        spans = line_spans(text)
        assert spans[0][0] == "Job succeeded"
        style = spans[0][1]
        assert style.bold
        assert style.color is not None
        assert style.color.number == 2

    def test_mixed_spans(self) -> None:
        text = parse_styled("ok \x1b[31mfail\x1b[0m done")
        assert text.plain == "ok fail done"
        fragments = [fragment for fragment, _ in line_spans(text)]
        assert "".join(fragments) == "ok fail done"
        assert "fail" in fragments

    def test_non_sgr_sequences_dropped(self) -> None:
        assert parse_styled("\x1b[0Kcleared").plain == "cleared"

    def test_empty_line(self) -> None:
        text = parse_styled("")
        assert text.plain == ""
        assert line_spans(text) == [("", Style())]

    def test_only_first_line_kept(self) -> None:
        assert parse_styled("first\nsecond").plain == "first"

    def test_style_does_not_bleed_between_lines(self) -> None:
        parse_styled("\x1b[31munterminated red")
        assert parse_styled("plain").spans == []

    def test_decoder_failure_falls_back_to_raw(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def boom(_self: AnsiDecoder, _text: str) -> Iterator[Text]:
            msg = "bad escape"
            raise ValueError(msg)

        monkeypatch.setattr(AnsiDecoder, "decode", boom)
        raw = "\x1b[38;5;999mbroken"
        text = parse_styled(raw)
        assert text.plain == raw
        assert text.spans == []

    @pytest.mark.parametrize("seed", range(5))
    def test_garbage_never_raises(self, seed: int) -> None:
        rng = random.Random(seed)
        garbage = bytes(rng.randrange(256) for _ in range(200)).decode("latin-1")
        assert isinstance(parse_styled(garbage), Text)

    @pytest.mark.parametrize(
        "line", ["\x1b[", "\x1b[38;5m", "\x1b[38;2;1m", "\x1b[999999m", "\x1b]8;;", "\x1b[;;;m x", "\x00\x1b\x1b["]
    )
    def test_malformed_sequences_never_raise(self, line: str) -> None:
        assert isinstance(parse_styled(line), Text)


class TestLineSpans:
    def test_at_least_one_span(self) -> None:
        assert len(line_spans(Text())) == 1

    def test_fragments_cover_plain_text(self) -> None:
        text = Text.assemble("a", ("b", "bold"), "c")
        assert "".join(fragment for fragment, _ in line_spans(text)) == "abc"


class TestSplitLogLines:
    def test_trailing_newline(self) -> None:
        assert split_log_lines("a\nb\n") == ["a", "b"]

    def test_crlf(self) -> None:
        assert split_log_lines("a\r\nb\n") == ["a", "b"]

    def test_inner_carriage_return_kept(self) -> None:
        assert split_log_lines("10%\r100%\n") == ["10%\r100%"]

    def test_empty(self) -> None:
        assert split_log_lines("") == []

    def test_blank_lines_kept(self) -> None:
        assert split_log_lines("a\n\nb") == ["a", "", "b"]


class TestProcessLog:
    def test_sample_log_full(self, sample_log: str) -> None:
        lines = process_log(sample_log, TimestampMode.FULL)
        assert [line.plain for line in lines] == [
            "Running with gitlab-runner 16.8.0",
            "",
            "2024-01-15 10:30:45 Job succeeded",
            "2024-01-15 10:30:46 $ make test",
            "plain output line",
            "",
            "2024-01-15 10:30:47 ERROR: test failed",
        ]

    def test_sample_log_hidden(self, sample_log: str) -> None:
        lines = process_log(sample_log, TimestampMode.HIDDEN)
        assert lines[2].plain == "Job succeeded"
        assert lines[6].plain == "ERROR: test failed"

    def test_styles_survive_pipeline(self, sample_log: str) -> None:
        lines = process_log(sample_log, TimestampMode.HIDDEN)
        assert lines[2].spans
