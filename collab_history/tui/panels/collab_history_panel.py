"""Collab History panel: the display surface driven by HistoryPresenter."""

from __future__ import annotations

import logging
from collections.abc import Coroutine, Sequence
from typing import Any

from textual import on
from textual.app import ComposeResult
from textual.containers import Container, Vertical, VerticalScroll
from textual.timer import Timer
from textual.widgets import ContentSwitcher, Static

from collab_history.history.actions import RevisionActions, SessionActions
from collab_history.history.models import (
    DateGroupMarker,
    HistoryEntry,
    HistoryItem,
    HistoryState,
)
from collab_history.history.presenter import HistoryPresenter
from collab_history.history.protocols import RevisionsService
from collab_history.history.state_machine import STATE_ARTIFACTS, StateArtifact
from collab_history.stores.history_settings import HistorySettings
from collab_history.theme import COLLAB_THEME
from collab_history.tui.messages import PageChangeRequested, StatusActionRequested
from collab_history.tui.panels.history_panel_style import HISTORY_PANEL_STYLE
from collab_history.tui.widgets.pager import Pager
from collab_history.tui.widgets.revision_row import DateLine, RevisionRow
from collab_history.tui.widgets.status_view import StatusView


logger = logging.getLogger(__name__)


def _state_view_id(state: HistoryState) -> str:
    return f"state-{state.value.replace('_', '-')}"


class CollabHistoryPanel(Container):
    """Shows one view per history state and the paged revision list."""

    DEFAULT_CSS = HISTORY_PANEL_STYLE

    def __init__(
        self,
        service: RevisionsService,
        actions: RevisionActions | None = None,
        session_actions: SessionActions | None = None,
        settings: HistorySettings | None = None,
        **kwargs,
    ):
        """Initialize the history panel.

        Args:
            service: Source of revisions and session status
            actions: Handlers for the per-revision buttons
            session_actions: Handlers for the sign-in and learn-more buttons
            settings: Page size and polling interval
        """
        super().__init__(**kwargs)
        self.settings = settings or HistorySettings()
        self.presenter = HistoryPresenter(
            view=self,
            service=service,
            actions=actions,
            session_actions=session_actions,
            page_size=self.settings.items_per_page,
            schedule=self._schedule,
        )
        self._rows: dict[str, RevisionRow] = {}
        self._poll_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        yield Static("Collab History", classes="history-header")
        with ContentSwitcher(id="history-states"):
            for state, artifact in STATE_ARTIFACTS.items():
                if artifact.shows_history:
                    with Vertical(id=_state_view_id(state)):
                        yield Pager(id="history-pager")
                        yield VerticalScroll(id="history-list")
                else:
                    yield StatusView(artifact, id=_state_view_id(state))

    def on_mount(self) -> None:
        """Show the connecting view and start polling the session status."""
        self.presenter.set_state(HistoryState.WAITING)
        self.poll_session()
        self._poll_timer = self.set_interval(
            self.settings.session_poll_interval, self.poll_session
        )

    def on_unmount(self) -> None:
        if self._poll_timer:
            self._poll_timer.stop()
            self._poll_timer = None

    def poll_session(self) -> None:
        self.run_worker(
            self.presenter.poll_session(),
            name="history_session",
            group="history_session",
            exclusive=True,
            exit_on_error=False,
        )

    def _schedule(self, coro: Coroutine[Any, Any, None]) -> None:
        self.run_worker(
            coro,
            name="history_revisions",
            group="history_revisions",
            exit_on_error=False,
        )

    # ----- HistoryView -----

    def show_state(self, state: HistoryState, artifact: StateArtifact) -> None:
        del artifact
        self.query_one("#history-states", ContentSwitcher).current = _state_view_id(
            state
        )

    def show_revisions(
        self, items: Sequence[HistoryEntry], total_count: int, page_index: int
    ) -> None:
        list_container = self.query_one("#history-list", VerticalScroll)
        list_container.remove_children()
        self._rows = {}

        self.query_one("#history-pager", Pager).update_pages(
            page_index, self.presenter.paginator.page_count
        )

        if not items:
            list_container.mount(
                Static(
                    f"[{COLLAB_THEME.warning}]No revisions yet."
                    f"[/{COLLAB_THEME.warning}]",
                    classes="history-empty",
                )
            )
            return

        widgets: list[DateLine | RevisionRow] = []
        for entry in items:
            if isinstance(entry, DateGroupMarker):
                widgets.append(DateLine(entry))
                continue
            row = RevisionRow(entry)
            self._rows[entry.revision_id] = row
            widgets.append(row)
        list_container.mount_all(widgets)
        logger.debug(f"Rendered page {page_index} ({len(self._rows)}/{total_count})")

    def decorations_changed(self, items: Sequence[HistoryItem]) -> None:
        for item in items:
            row = self._rows.get(item.revision_id)
            if row is not None and row.is_mounted:
                row.refresh_decorations()

    def close(self) -> None:
        self.remove()

    # ----- Host-facing API -----

    def set_in_progress(self, revision_id: str | None) -> None:
        self.presenter.set_in_progress(revision_id)

    def set_actions_enabled(self, enabled: bool) -> None:
        self.presenter.set_actions_enabled(enabled)

    def refresh_history(self) -> None:
        self.presenter.refresh()

    # ----- Message handlers -----

    @on(PageChangeRequested)
    def _on_page_change_requested(self, event: PageChangeRequested) -> None:
        event.stop()
        self.presenter.request_page(event.page_index)

    @on(StatusActionRequested)
    def _on_status_action_requested(self, event: StatusActionRequested) -> None:
        event.stop()
        self.presenter.on_status_action()
