"""Textual application hosting the job log viewer."""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult

from joblens.config import load_config, save_config
from joblens.models import AppConfig, LogViewState, TimestampMode
from joblens.widgets.log_viewer import JobLogView

logger = logging.getLogger(__name__)


class JobLogApp(App[None]):
    """Log viewer TUI application for a single CI job log."""

    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        content: str | None,
        job_name: str | None = None,
        timestamp_mode: TimestampMode | None = None,
        config: AppConfig | None = None,
    ) -> None:
        super().__init__()
        self._config = config or load_config()
        self._initial_state = LogViewState(
            job_name=job_name,
            content=content,
            timestamp_mode=timestamp_mode or self._config.timestamp_mode,
        )
        self.theme = self._config.theme

    def compose(self) -> ComposeResult:
        yield JobLogView(
            self._initial_state,
            percent=self._config.popup_percent,
            center_matches=self._config.center_matches,
            id="log-viewer",
        )

    def on_mount(self) -> None:
        self.query_one("#log-viewer", JobLogView).focus()

    def on_job_log_view_closed(self, message: JobLogView.Closed) -> None:
        """Remember the last timestamp mode, then quit."""
        if message.state.timestamp_mode != self._config.timestamp_mode:
            self._config = self._config.model_copy(update={"timestamp_mode": message.state.timestamp_mode})
            try:
                save_config(self._config)
            except OSError:
                logger.warning("Could not save config", exc_info=True)
        self.exit()
