"""In-place progress and enabled-state decoration of materialised items."""

from __future__ import annotations

from collections.abc import Iterable

from collab_history.history.models import HistoryItem


class ProgressDecorator:
    """Keeps the in-progress and actions-enabled flags of visible items in sync.

    Items are held in an ordered list with a `revision_id -> position` index
    so a decoration change touches flags only and never reorders, reclassifies
    or rebuilds anything.
    """

    def __init__(self) -> None:
        self._items: list[HistoryItem] = []
        self._positions: dict[str, int] = {}
        self._in_progress_id: str | None = None
        self._actions_enabled = False

    @property
    def in_progress_id(self) -> str | None:
        return self._in_progress_id

    @property
    def actions_enabled(self) -> bool:
        return self._actions_enabled

    @property
    def items(self) -> list[HistoryItem]:
        return list(self._items)

    def item(self, revision_id: str) -> HistoryItem | None:
        position = self._positions.get(revision_id)
        return None if position is None else self._items[position]

    def attach(self, items: Iterable[HistoryItem]) -> None:
        """Replace the materialised items and apply the current flags to them."""
        self._items = list(items)
        self._positions = {
            item.revision_id: position for position, item in enumerate(self._items)
        }
        for item in self._items:
            item.is_in_progress = item.revision_id == self._in_progress_id
            item.actions_enabled = self._actions_enabled

    def clear(self) -> None:
        self._items = []
        self._positions = {}

    def set_in_progress(self, revision_id: str | None) -> list[HistoryItem]:
        """Mark one revision as in progress and clear every other item.

        Returns:
            The items whose flag actually changed.
        """
        self._in_progress_id = revision_id
        changed: list[HistoryItem] = []
        for item in self._items:
            is_in_progress = item.revision_id == revision_id
            if item.is_in_progress != is_in_progress:
                item.is_in_progress = is_in_progress
                changed.append(item)
        return changed

    def set_actions_enabled(self, enabled: bool) -> list[HistoryItem]:
        """Enable or disable revision actions on every item."""
        if enabled == self._actions_enabled:
            return []

        self._actions_enabled = enabled
        for item in self._items:
            item.actions_enabled = enabled
        return list(self._items)
