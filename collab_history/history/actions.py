"""Callback bundles injected into the presenter and every history item."""

from collections.abc import Callable
from dataclasses import dataclass


RevisionAction = Callable[[str], None]


def _noop(*_args: object) -> None:
    pass


@dataclass(frozen=True, slots=True)
class RevisionActions:
    """Per-revision action handlers supplied by the host application.

    Every handler except `show_services` receives the revision id.
    """

    go_back: RevisionAction = _noop
    update_to: RevisionAction = _noop
    restore: RevisionAction = _noop
    show_build: RevisionAction = _noop
    show_services: Callable[[], None] = _noop


@dataclass(frozen=True, slots=True)
class SessionActions:
    """Handlers behind the single button of the signed-out and no-seat views."""

    show_login: Callable[[], None] = _noop
    open_seat_info: Callable[[], None] = _noop
