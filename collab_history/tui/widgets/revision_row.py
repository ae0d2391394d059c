"""Rows of the revision list: date separators and revisions."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Static

from collab_history.history.models import (
    DateGroupMarker,
    HistoryItem,
    RevisionClassification,
)


# Revision actions offered per classification, as (item method, label)
ROW_ACTIONS: dict[RevisionClassification, tuple[tuple[str, str], ...]] = {
    RevisionClassification.CURRENT: (("restore", "Restore"),),
    RevisionClassification.OBTAINED: (("go_back", "Go back"),),
    RevisionClassification.ABSENT: (("update_to", "Update"),),
}

_CLASSIFICATION_CLASSES = {
    RevisionClassification.CURRENT: ("revision-current", "revision-obtained"),
    RevisionClassification.OBTAINED: ("revision-obtained",),
    RevisionClassification.ABSENT: ("revision-absent",),
}


class DateLine(Static):
    """Date separator placed before the first revision of a day."""

    def __init__(self, marker: DateGroupMarker, **kwargs):
        super().__init__(marker.date.strftime("%b %d, %Y"), markup=False, **kwargs)
        self.marker = marker
        if marker.is_fully_resolved:
            self.add_class("date-resolved")


class RevisionRow(Horizontal):
    """A single revision with its action buttons."""

    def __init__(self, item: HistoryItem, **kwargs):
        super().__init__(**kwargs)
        self.item = item
        for css_class in _CLASSIFICATION_CLASSES[item.classification]:
            self.add_class(css_class)

    def compose(self) -> ComposeResult:
        revision = self.item.revision
        yield Static(f"#{self.item.display_index}", classes="revision-index")
        yield Static(self._body_text(), classes="revision-body")
        with Horizontal(classes="revision-buttons"):
            for action, label in ROW_ACTIONS[self.item.classification]:
                yield Button(label, name=action)
            if revision.build_available:
                yield Button("Build", name="show_build")

    def on_mount(self) -> None:
        self.refresh_decorations()

    def _body_text(self) -> str:
        revision = self.item.revision
        comment = (
            escape(revision.comment) if revision.comment else "[dim]No comment[/dim]"
        )
        time_str = revision.timestamp.strftime("%H:%M")
        author = f"{escape(revision.author_name)} • " if revision.author_name else ""
        status = "\n[italic]In progress…[/italic]" if self.item.is_in_progress else ""
        return f"{comment}\n[dim]{author}{time_str}[/dim]{status}"

    def refresh_decorations(self) -> None:
        """Apply the item's in-progress and enabled flags without rebuilding."""
        self.set_class(self.item.is_in_progress, "revision-in-progress")
        self.query_one(".revision-body", Static).update(self._body_text())
        for button in self.query(Button):
            if button.name != "show_build":
                button.disabled = not self.item.actions_enabled

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.name:
            getattr(self.item, event.button.name)()
