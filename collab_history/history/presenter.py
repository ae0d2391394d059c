"""Orchestrates the history view.

The presenter owns the active state, the current page window and the
decoration flags. Every entry point runs to completion on the event loop;
the only asynchronous work is the awaited service call, which is handed to
the injected `schedule` callable (Textual's `run_worker` in the app).

Results are applied in arrival order. Each fetch carries the request
generation it was issued under; a page change or a state change bumps the
generation, so a late result for a page the user already left is dropped.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from collab_history.history.actions import RevisionActions, SessionActions
from collab_history.history.decorator import ProgressDecorator
from collab_history.history.grouper import group_revisions
from collab_history.history.models import (
    HistoryState,
    PageWindow,
    RevisionsPage,
)
from collab_history.history.paginator import DEFAULT_PAGE_SIZE, Paginator
from collab_history.history.protocols import (
    HistoryView,
    RevisionsService,
    RevisionsServiceError,
)
from collab_history.history.session import SessionStatus, state_for_status
from collab_history.history.state_machine import HistoryStateMachine, StateArtifact


logger = logging.getLogger(__name__)

Scheduler = Callable[[Coroutine[Any, Any, None]], Any]

_background_tasks: set[asyncio.Task] = set()


def schedule_on_running_loop(coro: Coroutine[Any, Any, None]) -> asyncio.Task:
    """Run `coro` as a task on the running loop and keep it referenced."""
    task = asyncio.get_running_loop().create_task(coro)
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    return task


class HistoryPresenter:
    """Feeds session and revision updates into the view."""

    def __init__(
        self,
        view: HistoryView,
        service: RevisionsService,
        actions: RevisionActions | None = None,
        session_actions: SessionActions | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        schedule: Scheduler | None = None,
    ) -> None:
        self._view = view
        self._service = service
        self._actions = actions or RevisionActions()
        self._session_actions = session_actions or SessionActions()
        self._schedule = schedule or schedule_on_running_loop

        self._paginator = Paginator(page_size)
        self._decorator = ProgressDecorator()
        self._machine = HistoryStateMachine(
            render=self._render_state,
            on_ready=self._on_ready,
            on_disabled=self._on_disabled,
        )
        self._window: PageWindow | None = None
        self._generation = 0
        self._tip: str | None = None
        self._closed = False

    # ----- Read-only state -----

    @property
    def state(self) -> HistoryState | None:
        return self._machine.state

    @property
    def window(self) -> PageWindow | None:
        return self._window

    @property
    def paginator(self) -> Paginator:
        return self._paginator

    @property
    def decorator(self) -> ProgressDecorator:
        return self._decorator

    @property
    def tip(self) -> str | None:
        return self._tip

    @property
    def is_closed(self) -> bool:
        """True once the view was torn down by DISABLED; nothing reaches it again."""
        return self._closed

    # ----- Session state -----

    def on_session_status(self, status: SessionStatus | str, force: bool = False) -> bool:
        """Apply a session status reported by the service."""
        return self.set_state(state_for_status(status), force)

    def set_state(self, state: HistoryState | str, force: bool = False) -> bool:
        state = HistoryState(state)
        if self._closed and state != HistoryState.DISABLED:
            logger.debug(f"Ignoring state {state}: history view is closed")
            return False
        return self._machine.set_state(state, force)

    async def poll_session(self) -> None:
        """Ask the service for the session status once and apply it."""
        if self._closed:
            return
        status = await self._service.get_session_status()
        self.on_session_status(status)

    def on_status_action(self) -> None:
        """Run the single button of the current status view, if it has one."""
        if self.state == HistoryState.LOGGED_OUT:
            self._session_actions.show_login()
        elif self.state == HistoryState.NO_SEAT:
            self._session_actions.open_seat_info()

    def _render_state(self, state: HistoryState, artifact: StateArtifact) -> None:
        if state != HistoryState.READY:
            # Anything still in flight belongs to the state we just left.
            self._generation += 1
        self._view.show_state(state, artifact)

    def _on_ready(self) -> None:
        self._fetch_page(self._paginator.page_index)

    def _on_disabled(self) -> None:
        self._closed = True
        self._generation += 1
        self._decorator.clear()
        self._window = None
        self._view.close()

    # ----- Pages -----

    def request_page(self, page_index: int) -> None:
        """Show another page, fetching it unless it is already held locally."""
        target = self._paginator.clamp(page_index)
        if self.state != HistoryState.READY or self._closed:
            logger.debug(f"Ignoring page request {page_index} while {self.state}")
            return

        if self._paginator.local_count and self._paginator.is_page_loaded(target):
            self._generation += 1
            self._publish(self._paginator.set_page(target))
            return

        self._fetch_page(target)

    def refresh(self) -> None:
        """Refetch the visible page, e.g. after the service reports new revisions."""
        if self.state == HistoryState.READY and not self._closed:
            self._fetch_page(self._paginator.page_index)

    def set_items_per_page(self, page_size: int) -> bool:
        """Change the page size and reload the visible page if it changed."""
        if not self._paginator.set_page_size(page_size):
            return False
        if self.state == HistoryState.READY and not self._closed:
            self.request_page(self._paginator.page_index)
        return True

    def update_revisions(
        self,
        page: RevisionsPage,
        page_index: int = 0,
        generation: int | None = None,
    ) -> bool:
        """Rebuild the visible page from a batch of revisions.

        Args:
            page: Revisions starting at the first revision of `page_index`
            page_index: Page the batch was fetched for
            generation: Request generation of the fetch; None for pushed data

        Returns:
            False if the batch was stale or arrived outside the ready state.
        """
        if self.state != HistoryState.READY or self._closed:
            logger.debug(f"Discarding revisions for page {page_index}: {self.state}")
            return False
        if generation is not None and generation != self._generation:
            logger.debug(f"Discarding stale revisions for page {page_index}")
            return False

        self._tip = page.tip
        self._paginator.set_total_count(page.total_revisions)
        self._paginator.set_revisions(
            page.items, offset=page_index * self._paginator.page_size
        )
        target = self._paginator.clamp(page_index)
        if target != page_index and not self._paginator.is_page_loaded(target):
            # The history shrank below the requested page
            logger.debug(f"Page {page_index} is gone, fetching page {target}")
            self._fetch_page(target)
            return True

        self._publish(self._paginator.set_page(target))
        return True

    def _fetch_page(self, page_index: int) -> None:
        self._generation += 1
        self._schedule(self._load_page(page_index, self._generation))

    async def _load_page(self, page_index: int, generation: int) -> None:
        try:
            page = await self._service.get_revisions(
                page_index, self._paginator.page_size
            )
        except RevisionsServiceError as e:
            if generation != self._generation:
                logger.debug(f"Ignoring failure of stale page {page_index}: {e}")
                return
            logger.warning(f"Failed to load revisions page {page_index}: {e}")
            self.set_state(HistoryState.ERROR)
            return

        self.update_revisions(page, page_index=page_index, generation=generation)

    def _publish(self, window: PageWindow) -> None:
        window.items = group_revisions(window.revisions, self._actions)
        self._decorator.attach(window.history_items)
        self._window = window
        self._view.show_revisions(window.items, window.total_count, window.page_index)

    # ----- Decoration -----

    def set_in_progress(self, revision_id: str | None) -> None:
        changed = self._decorator.set_in_progress(revision_id)
        if changed and not self._closed:
            self._view.decorations_changed(changed)

    def set_actions_enabled(self, enabled: bool) -> None:
        changed = self._decorator.set_actions_enabled(enabled)
        if changed and not self._closed:
            self._view.decorations_changed(changed)

    def show_services(self) -> None:
        self._actions.show_services()
