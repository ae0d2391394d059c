"""Status message shown for every history state other than ready."""

from textual.app import ComposeResult
from textual.containers import Center, Vertical
from textual.widgets import Button, Static

from collab_history.history.state_machine import StateArtifact
from collab_history.tui.messages import StatusActionRequested


class StatusView(Vertical):
    """A centered message with an optional single action button."""

    def __init__(self, artifact: StateArtifact, **kwargs):
        super().__init__(**kwargs)
        self.artifact = artifact

    def compose(self) -> ComposeResult:
        icon = f"{self.artifact.icon} " if self.artifact.icon else ""
        yield Static(
            f"{icon}{self.artifact.message}", classes="status-message", markup=False
        )
        if self.artifact.button_text:
            with Center():
                yield Button(self.artifact.button_text, name="status_action")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(StatusActionRequested())
