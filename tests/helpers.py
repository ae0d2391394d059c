"""Builders and test doubles shared across the history tests."""

from __future__ import annotations

from collections.abc import Coroutine, Sequence
from datetime import UTC, datetime
from typing import Any

from collab_history.history.models import (
    HistoryEntry,
    HistoryItem,
    HistoryState,
    RevisionData,
)
from collab_history.history.state_machine import StateArtifact


DAY_ONE = datetime(2025, 3, 2, 15, 0, tzinfo=UTC)
DAY_TWO = datetime(2025, 3, 1, 15, 0, tzinfo=UTC)


def make_revision(
    revision_id: str,
    when: datetime,
    *,
    index: int = 0,
    current: bool = False,
    obtained: bool = False,
    **kwargs: Any,
) -> RevisionData:
    return RevisionData(
        index=index,
        timestamp=when,
        is_current=current,
        is_obtained=obtained,
        revision_id=revision_id,
        **kwargs,
    )


def make_history(
    dates: Sequence[datetime], current_position: int | None = None
) -> list[RevisionData]:
    """One revision per timestamp, newest first, indexed from the oldest."""
    count = len(dates)
    return [
        make_revision(
            f"r{count - position}",
            when,
            index=count - position,
            current=position == current_position,
            obtained=current_position is not None and position >= current_position,
        )
        for position, when in enumerate(dates)
    ]


def row_ids(entries: Sequence[HistoryEntry]) -> list[str]:
    return [entry.revision_id for entry in entries if isinstance(entry, HistoryItem)]


class RecordingView:
    """HistoryView that records every call for assertions."""

    def __init__(self) -> None:
        self.states: list[HistoryState] = []
        self.pages: list[tuple[list[HistoryEntry], int, int]] = []
        self.decorations: list[list[HistoryItem]] = []
        self.closed = 0

    def show_state(self, state: HistoryState, artifact: StateArtifact) -> None:
        self.states.append(state)

    def show_revisions(
        self, items: Sequence[HistoryEntry], total_count: int, page_index: int
    ) -> None:
        self.pages.append((list(items), total_count, page_index))

    def decorations_changed(self, items: Sequence[HistoryItem]) -> None:
        self.decorations.append(list(items))

    def close(self) -> None:
        self.closed += 1

    @property
    def last_page(self) -> tuple[list[HistoryEntry], int, int]:
        return self.pages[-1]


class CollectingScheduler:
    """Collects scheduled coroutines so tests decide when they run."""

    def __init__(self) -> None:
        self.pending: list[Coroutine[Any, Any, None]] = []

    def __call__(self, coro: Coroutine[Any, Any, None]) -> None:
        self.pending.append(coro)

    async def run_all(self) -> None:
        while self.pending:
            await self.pending.pop(0)

    def discard_all(self) -> None:
        for coro in self.pending:
            coro.close()
        self.pending.clear()
