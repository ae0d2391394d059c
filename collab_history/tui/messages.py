"""Messages posted by history widgets to the panel that owns the presenter."""

from dataclasses import dataclass

from textual.message import Message


@dataclass
class PageChangeRequested(Message):
    """Sent by the pager when the user asks for another page."""

    page_index: int


class StatusActionRequested(Message):
    """Sent when the button of a status view (sign in, learn more) is pressed."""

    pass
