"""Textual application hosting the Collab History panel."""

from __future__ import annotations

import logging
import webbrowser

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal

from collab_history.history.actions import RevisionActions, SessionActions
from collab_history.history.protocols import RevisionsService
from collab_history.services.in_memory import InMemoryRevisionsService
from collab_history.stores.history_settings import HistorySettings
from collab_history.theme import COLLAB_THEME
from collab_history.tui.panels.collab_history_panel import CollabHistoryPanel


logger = logging.getLogger(__name__)

# Seconds a simulated revision operation stays in progress
SIMULATED_OPERATION_SECONDS = 1.5


class CollabHistoryApp(App):
    """Hosts the history panel and plays the role of the editor around it.

    Revision actions are not executed against a real workspace: the app marks
    the revision in progress, disables revision actions while the operation
    runs and, for the in-memory service, moves the current revision.
    """

    TITLE = "Collab History"
    BINDINGS = [
        Binding("r", "refresh_history", "Refresh"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        service: RevisionsService,
        settings: HistorySettings | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.service = service
        self.settings = settings or HistorySettings()

    def compose(self) -> ComposeResult:
        with Horizontal(id="content_area"):
            yield CollabHistoryPanel(
                service=self.service,
                actions=RevisionActions(
                    go_back=lambda rev: self._run_revision_action("Going back to", rev),
                    update_to=lambda rev: self._run_revision_action("Updating to", rev),
                    restore=lambda rev: self._run_revision_action("Restoring", rev),
                    show_build=self._show_build,
                    show_services=self._show_services,
                ),
                session_actions=SessionActions(
                    show_login=self._show_login,
                    open_seat_info=self._open_seat_info,
                ),
                settings=self.settings,
            )

    @property
    def panel(self) -> CollabHistoryPanel:
        return self.query_one(CollabHistoryPanel)

    def on_mount(self) -> None:
        self.register_theme(COLLAB_THEME)
        self.theme = COLLAB_THEME.name
        self.panel.set_actions_enabled(True)

    def action_refresh_history(self) -> None:
        self.panel.refresh_history()

    def _run_revision_action(self, label: str, revision_id: str) -> None:
        logger.info(f"{label} {revision_id}")
        panel = self.panel
        panel.set_actions_enabled(False)
        panel.set_in_progress(revision_id)
        self.notify(f"{label} {revision_id}…")
        self.set_timer(
            SIMULATED_OPERATION_SECONDS,
            lambda: self._finish_revision_action(revision_id),
        )

    def _finish_revision_action(self, revision_id: str) -> None:
        if isinstance(self.service, InMemoryRevisionsService):
            self.service.mark_current(revision_id)
        panels = self.query(CollabHistoryPanel)
        if not panels:
            # History was disabled while the operation ran
            return
        panel = panels.first()
        panel.set_in_progress(None)
        panel.set_actions_enabled(True)
        panel.refresh_history()

    def _show_build(self, revision_id: str) -> None:
        self.notify(f"No build viewer available for {revision_id}")

    def _show_services(self) -> None:
        self.notify("Cloud services are managed from the web dashboard")

    def _show_login(self) -> None:
        self.notify(
            "Set COLLAB_API_KEY and restart to sign in",
            severity="warning",
        )

    def _open_seat_info(self) -> None:
        webbrowser.open(self.settings.effective_server_url)
