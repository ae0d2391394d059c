"""Group a flat, recency-ordered revision stream by calendar date."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from collab_history.history.actions import RevisionActions
from collab_history.history.models import (
    DateGroupMarker,
    HistoryEntry,
    HistoryItem,
    RevisionData,
)


def group_revisions(
    revisions: Iterable[RevisionData],
    actions: RevisionActions | None = None,
) -> list[HistoryEntry]:
    """Interleave date markers with history items.

    The input is expected to be sorted already; it is never reordered. A
    marker is emitted whenever the calendar date changes. Its
    `is_fully_resolved` flag is false until the current revision has been
    seen and true for every marker after it, since everything older than
    the current revision is already present locally.
    """
    entries: list[HistoryEntry] = []
    current_date: date | None = None
    is_fully_resolved = False

    for revision in revisions:
        revision_date = revision.timestamp.date()
        if revision_date != current_date:
            entries.append(DateGroupMarker(revision_date, is_fully_resolved))
            current_date = revision_date

        entries.append(HistoryItem.from_revision(revision, actions))
        if revision.is_current:
            is_fully_resolved = True

    return entries
