"""Session status reported by the service and its fixed mapping to view states."""

from enum import Enum

from collab_history.history.models import HistoryState


class SessionStatus(Enum):
    AUTHENTICATED = "authenticated"
    CONNECTING = "connecting"
    OFFLINE = "offline"
    MAINTENANCE = "maintenance"
    ERROR = "error"
    LOGGED_OUT = "logged_out"
    NO_SEAT = "no_seat"
    COLLAB_DISABLED = "collab_disabled"


SESSION_STATE_MAP: dict[SessionStatus, HistoryState] = {
    SessionStatus.AUTHENTICATED: HistoryState.READY,
    SessionStatus.CONNECTING: HistoryState.WAITING,
    SessionStatus.OFFLINE: HistoryState.OFFLINE,
    SessionStatus.MAINTENANCE: HistoryState.MAINTENANCE,
    SessionStatus.ERROR: HistoryState.ERROR,
    SessionStatus.LOGGED_OUT: HistoryState.LOGGED_OUT,
    SessionStatus.NO_SEAT: HistoryState.NO_SEAT,
    SessionStatus.COLLAB_DISABLED: HistoryState.DISABLED,
}


def state_for_status(status: SessionStatus | str) -> HistoryState:
    """Map a session status (or its raw value) to the history view state.

    Raises:
        ValueError: If the status is not a known session status.
    """
    return SESSION_STATE_MAP[SessionStatus(status)]
