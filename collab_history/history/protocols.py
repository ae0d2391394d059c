from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from collab_history.history.models import (
    HistoryEntry,
    HistoryItem,
    HistoryState,
    RevisionsPage,
)
from collab_history.history.session import SessionStatus
from collab_history.history.state_machine import StateArtifact


class RevisionsServiceError(Exception):
    """Raised by a revisions service when a page cannot be fetched."""

    pass


class RevisionsService(Protocol):
    """Protocol for the collaborator that owns transport and authentication."""

    async def get_revisions(self, page_index: int, page_size: int) -> RevisionsPage:
        """Fetch one page of revisions, newest first.

        Args:
            page_index: 0-based page number.
            page_size: Number of revisions per page.

        Returns:
            The revisions of that page with the tip and the total count.

        Raises:
            RevisionsServiceError: If the page cannot be fetched.
        """
        ...

    async def get_session_status(self) -> SessionStatus:
        """Report the current connectivity and account status."""
        ...


class HistoryView(Protocol):
    """Protocol for the display surface driven by the presenter."""

    def show_state(self, state: HistoryState, artifact: StateArtifact) -> None:
        """Swap the visible artifact."""
        ...

    def show_revisions(
        self, items: Sequence[HistoryEntry], total_count: int, page_index: int
    ) -> None:
        """Replace the body of the ready view with a new page."""
        ...

    def decorations_changed(self, items: Sequence[HistoryItem]) -> None:
        """Refresh the flags of already displayed items."""
        ...

    def close(self) -> None:
        """Tear the view down."""
        ...
