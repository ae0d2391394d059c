"""Selection of the single visible history view state."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from collab_history.history.models import HistoryState


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StateArtifact:
    """What the display surface shows for a state.

    `shows_history` marks the revision list; every other artifact is a status
    message with at most one button.
    """

    message: str = ""
    button_text: str | None = None
    icon: str | None = None
    shows_history: bool = False


# DISABLED has no artifact: it tears the view down.
STATE_ARTIFACTS: dict[HistoryState, StateArtifact] = {
    HistoryState.ERROR: StateArtifact("An Error Occurred", icon="⚠"),
    HistoryState.OFFLINE: StateArtifact("No Internet Connection", icon="⊘"),
    HistoryState.MAINTENANCE: StateArtifact("Maintenance"),
    HistoryState.LOGGED_OUT: StateArtifact(
        "Sign in to access Collaborate", button_text="Sign in..."
    ),
    HistoryState.NO_SEAT: StateArtifact(
        "Ask your project owner for access to Unity Teams",
        button_text="Learn More",
    ),
    HistoryState.WAITING: StateArtifact("Connecting..."),
    HistoryState.READY: StateArtifact(shows_history=True),
}

_unmapped = set(HistoryState) - set(STATE_ARTIFACTS) - {HistoryState.DISABLED}
if _unmapped:
    raise RuntimeError(
        f"History states without an artifact: {sorted(s.value for s in _unmapped)}"
    )


class HistoryStateMachine:
    """Tracks the active state and decides when the view must re-render.

    Args:
        render: Swaps the visible artifact to the one for the given state
        on_ready: Runs before the READY artifact is shown
        on_disabled: Tears the view down; DISABLED is never recorded
    """

    def __init__(
        self,
        render: Callable[[HistoryState, StateArtifact], None],
        on_ready: Callable[[], None] | None = None,
        on_disabled: Callable[[], None] | None = None,
    ) -> None:
        self._render = render
        self._on_ready = on_ready
        self._on_disabled = on_disabled
        self._state: HistoryState | None = None

    @property
    def state(self) -> HistoryState | None:
        return self._state

    def set_state(self, new_state: HistoryState | str, force: bool = False) -> bool:
        """Switch to `new_state`.

        Returns:
            True if the view was re-rendered or torn down.

        Raises:
            ValueError: If `new_state` is not a history state.
        """
        new_state = HistoryState(new_state)
        if new_state == self._state and not force:
            return False

        if new_state == HistoryState.DISABLED:
            logger.info("History disabled, closing view")
            if self._on_disabled:
                self._on_disabled()
            return True

        logger.debug(f"History state {self._state} -> {new_state}")
        self._state = new_state

        if new_state == HistoryState.READY and self._on_ready:
            self._on_ready()
            if self._state != new_state:
                # The hook already moved on, e.g. a fetch that failed synchronously
                return True

        self._render(new_state, STATE_ARTIFACTS[new_state])
        return True
