"""Revisions service that pages a fixed list held in memory."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

from collab_history.history.models import RevisionData, RevisionsPage
from collab_history.history.protocols import RevisionsServiceError
from collab_history.history.session import SessionStatus


class InMemoryRevisionsService:
    """Serves revisions from a list, newest first.

    Used by the demo mode and by tests. `status` and `fail_next` can be
    changed at any time to simulate session changes and failed fetches.
    """

    def __init__(
        self,
        revisions: Sequence[RevisionData] = (),
        status: SessionStatus = SessionStatus.AUTHENTICATED,
    ):
        self.revisions = list(revisions)
        self.status = status
        self.fail_next = False
        self.requests: list[tuple[int, int]] = []

    @property
    def tip(self) -> str | None:
        return self.revisions[0].revision_id if self.revisions else None

    async def get_revisions(self, page_index: int, page_size: int) -> RevisionsPage:
        self.requests.append((page_index, page_size))
        if self.fail_next:
            self.fail_next = False
            raise RevisionsServiceError("Simulated failure")

        start = page_index * page_size
        return RevisionsPage(
            items=self.revisions[start : start + page_size],
            tip=self.tip,
            total_revisions=len(self.revisions),
        )

    async def get_session_status(self) -> SessionStatus:
        return self.status

    def mark_current(self, revision_id: str) -> None:
        """Make `revision_id` the current revision; it and everything older is obtained."""
        seen = False
        updated = []
        for revision in self.revisions:
            is_current = revision.revision_id == revision_id
            seen = seen or is_current
            updated.append(
                revision.model_copy(
                    update={
                        "is_current": is_current,
                        "is_obtained": seen or revision.is_obtained,
                    }
                )
            )
        self.revisions = updated


_AUTHORS = ("Ada", "Grace", "Linus", "Margaret")
_COMMENTS = (
    "Tweak lighting",
    "Fix player controller",
    "Add level two",
    "Update textures",
    "Refactor inventory",
    "Bump package versions",
)


def demo_revisions(
    count: int = 23,
    now: datetime | None = None,
    per_day: int = 3,
    current_position: int = 4,
) -> list[RevisionData]:
    """Build a sample history, newest first, spread over several days.

    The revision at `current_position` is current; it and everything older
    are obtained.
    """
    now = now or datetime.now(UTC)
    revisions: list[RevisionData] = []
    for position in range(count):
        day, slot = divmod(position, per_day)
        revisions.append(
            RevisionData(
                index=count - position,
                timestamp=now - timedelta(days=day, hours=slot),
                is_current=position == current_position,
                is_obtained=position >= current_position,
                revision_id=f"rev{count - position:04d}",
                author_name=_AUTHORS[position % len(_AUTHORS)],
                comment=_COMMENTS[position % len(_COMMENTS)],
                build_available=position % 2 == 0,
            )
        )
    return revisions
