"""Shared test fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE_LINES = [
    "\x00" "0ERunning with gitlab-runner 16.8.0",
    "section_start:1705314645:prepare_executor\r\x1b[0K\x1b[36;1mPreparing the executor\x1b[0;m",
    "00O2024-01-15T10:30:45.123Z \x1b[32;1mJob succeeded\x1b[0;m",
    "2024-01-15T10:30:46+00:00 $ make test",
    "plain output line",
    "section_end:1705314650:prepare_executor\r\x1b[0K",
    "2024-01-15T10:30:47Z ERROR: test failed",
]


@pytest.fixture
def sample_log() -> str:
    """Raw job log text with control prefixes, section markers, timestamps and ANSI colors."""
    return "\n".join(SAMPLE_LINES) + "\n"


@pytest.fixture
def sample_log_file(tmp_path: Path, sample_log: str) -> Path:
    """Create a temporary job log file with sample content."""
    log_file = tmp_path / "job.log"
    log_file.write_text(sample_log)
    return log_file


@pytest.fixture
def numbered_log() -> str:
    """A 100-line log of 'line 0' .. 'line 99'."""
    return "\n".join(f"line {i}" for i in range(100))


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep tests away from the user's real config directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("JOBLENS_CONFIG_DIR", str(config_dir))
    return config_dir
