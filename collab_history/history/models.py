"""Revision records and the presentation entities built from them.

`RevisionData` is produced by the revisions service and never changes.
`HistoryItem` and `DateGroupMarker` are derived from it and rebuilt
wholesale every time the presenter receives a new batch of revisions; only
the decoration flags on `HistoryItem` are mutated in place afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field


if TYPE_CHECKING:
    from collab_history.history.actions import RevisionActions


logger = logging.getLogger(__name__)


class RevisionData(BaseModel):
    """A single revision as reported by the revisions service."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    timestamp: datetime
    is_current: bool = False
    is_obtained: bool = False
    revision_id: str = Field(min_length=1)
    author_name: str = ""
    comment: str = ""
    build_available: bool = False


class RevisionsPage(BaseModel):
    """One page of revisions plus what the service knows about the whole stream."""

    items: list[RevisionData] = Field(default_factory=list)
    tip: str | None = None
    total_revisions: int = Field(default=0, ge=0)


class RevisionClassification(Enum):
    CURRENT = "current"
    OBTAINED = "obtained"
    ABSENT = "absent"


def classify(is_current: bool, is_obtained: bool) -> RevisionClassification:
    """Classify a revision. Current wins over obtained."""
    if is_current:
        return RevisionClassification.CURRENT
    if is_obtained:
        return RevisionClassification.OBTAINED
    return RevisionClassification.ABSENT


class HistoryState(Enum):
    """Mutually exclusive display states of the history view."""

    ERROR = "error"
    OFFLINE = "offline"
    MAINTENANCE = "maintenance"
    LOGGED_OUT = "logged_out"
    NO_SEAT = "no_seat"
    WAITING = "waiting"
    READY = "ready"
    DISABLED = "disabled"


@dataclass(frozen=True, slots=True)
class DateGroupMarker:
    """Separator emitted before the first revision of each calendar date."""

    date: date
    is_fully_resolved: bool


@dataclass(slots=True)
class HistoryItem:
    """Presentation entity for one revision row."""

    revision: RevisionData
    classification: RevisionClassification
    actions: RevisionActions | None = None
    is_in_progress: bool = False
    actions_enabled: bool = False

    @classmethod
    def from_revision(
        cls, revision: RevisionData, actions: RevisionActions | None = None
    ) -> HistoryItem:
        return cls(
            revision=revision,
            classification=classify(revision.is_current, revision.is_obtained),
            actions=actions,
        )

    @property
    def revision_id(self) -> str:
        return self.revision.revision_id

    @property
    def display_index(self) -> int:
        return self.revision.index

    def go_back(self) -> bool:
        return self._invoke_gated("go_back")

    def update_to(self) -> bool:
        return self._invoke_gated("update_to")

    def restore(self) -> bool:
        return self._invoke_gated("restore")

    def show_build(self) -> bool:
        if self.actions is None:
            return False
        self.actions.show_build(self.revision_id)
        return True

    def show_services(self) -> bool:
        if self.actions is None:
            return False
        self.actions.show_services()
        return True

    def _invoke_gated(self, name: str) -> bool:
        """Forward a revision action unless actions are currently disabled."""
        if self.actions is None:
            return False
        if not self.actions_enabled:
            logger.debug(f"Ignoring {name} for {self.revision_id}: actions disabled")
            return False
        getattr(self.actions, name)(self.revision_id)
        return True


HistoryEntry = DateGroupMarker | HistoryItem


@dataclass
class PageWindow:
    """The slice of the revision stream that is currently on screen."""

    page_index: int
    page_size: int
    total_count: int
    revisions: list[RevisionData] = field(default_factory=list)
    items: list[HistoryEntry] = field(default_factory=list)
    is_loaded: bool = True

    @property
    def history_items(self) -> list[HistoryItem]:
        """Revision rows only, without the date markers."""
        return [entry for entry in self.items if isinstance(entry, HistoryItem)]
