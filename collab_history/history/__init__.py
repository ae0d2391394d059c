"""History view-state reconciliation engine."""

from collab_history.history.actions import RevisionActions, SessionActions
from collab_history.history.decorator import ProgressDecorator
from collab_history.history.grouper import group_revisions
from collab_history.history.models import (
    DateGroupMarker,
    HistoryEntry,
    HistoryItem,
    HistoryState,
    PageWindow,
    RevisionClassification,
    RevisionData,
    RevisionsPage,
    classify,
)
from collab_history.history.paginator import Paginator
from collab_history.history.presenter import HistoryPresenter
from collab_history.history.session import SessionStatus, state_for_status
from collab_history.history.state_machine import (
    STATE_ARTIFACTS,
    HistoryStateMachine,
    StateArtifact,
)


__all__ = [
    "DateGroupMarker",
    "HistoryEntry",
    "HistoryItem",
    "HistoryPresenter",
    "HistoryState",
    "HistoryStateMachine",
    "PageWindow",
    "Paginator",
    "ProgressDecorator",
    "RevisionActions",
    "RevisionClassification",
    "RevisionData",
    "RevisionsPage",
    "STATE_ARTIFACTS",
    "SessionActions",
    "SessionStatus",
    "StateArtifact",
    "classify",
    "group_revisions",
    "state_for_status",
]
