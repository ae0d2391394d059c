"""Previous / next controls for the paged revision list."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Static

from collab_history.tui.messages import PageChangeRequested


class Pager(Horizontal):
    """Shows the current page and requests neighbouring pages."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.page_index = 0
        self.page_count = 1

    def compose(self) -> ComposeResult:
        yield Button("◀ Newer", name="prev", disabled=True)
        yield Static("", classes="pager-label")
        yield Button("Older ▶", name="next", disabled=True)

    def update_pages(self, page_index: int, page_count: int) -> None:
        self.page_index = page_index
        self.page_count = max(1, page_count)
        self.query_one(".pager-label", Static).update(
            f"Page {self.page_index + 1} of {self.page_count}"
        )
        for button in self.query(Button):
            if button.name == "prev":
                button.disabled = self.page_index <= 0
            else:
                button.disabled = self.page_index >= self.page_count - 1

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        step = -1 if event.button.name == "prev" else 1
        self.post_message(PageChangeRequested(self.page_index + step))
