"""Fixed-size pages over the flat revision stream.

The paginator knows how many revisions exist remotely (`total_count`) and
which contiguous run of them is held locally. It never looks at dates; the
presenter groups whatever slice it returns.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from collab_history.history.models import PageWindow, RevisionData


logger = logging.getLogger(__name__)

# Number of revisions shown per page unless configured otherwise
DEFAULT_PAGE_SIZE = 5


class Paginator:
    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self._page_size = _validate_page_size(page_size)
        self._total_count = 0
        self._page_index = 0
        self._revisions: list[RevisionData] = []
        self._offset = 0

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def page_index(self) -> int:
        return self._page_index

    @property
    def total_count(self) -> int:
        return self._total_count

    @property
    def local_count(self) -> int:
        """Number of revisions held locally."""
        return len(self._revisions)

    @property
    def page_count(self) -> int:
        return max(1, math.ceil(self._total_count / self._page_size))

    @property
    def last_page(self) -> int:
        return self.page_count - 1

    def clamp(self, page_index: int) -> int:
        return min(max(page_index, 0), self.last_page)

    def set_total_count(self, total_count: int) -> None:
        if total_count < 0:
            raise ValueError(f"Total count must be >= 0, got {total_count}")
        self._total_count = total_count
        self._page_index = self.clamp(self._page_index)

    def set_page_size(self, page_size: int) -> bool:
        """Change the page size, keeping the first visible revision on screen.

        Returns:
            False if the size was unchanged and nothing was recomputed.
        """
        page_size = _validate_page_size(page_size)
        if page_size == self._page_size:
            return False

        first_visible = self._page_index * self._page_size
        self._page_size = page_size
        self._page_index = self.clamp(first_visible // page_size)
        return True

    def set_revisions(self, revisions: Sequence[RevisionData], offset: int = 0) -> None:
        """Replace the locally known run of revisions.

        Args:
            revisions: Contiguous revisions, newest first
            offset: Absolute position of the first revision in the stream
        """
        if offset < 0:
            raise ValueError(f"Offset must be >= 0, got {offset}")
        self._revisions = list(revisions)
        self._offset = offset
        # Never report fewer revisions than are actually held. An empty run
        # says nothing about the total.
        if self._revisions:
            self._total_count = max(self._total_count, offset + len(self._revisions))

    def page_bounds(self, page_index: int) -> tuple[int, int]:
        """Absolute [start, end) of a page, clamped to the known total."""
        start = page_index * self._page_size
        end = min(start + self._page_size, self._total_count)
        return start, max(start, end)

    def is_page_loaded(self, page_index: int) -> bool:
        start, end = self.page_bounds(self.clamp(page_index))
        if start == end:
            return True
        local_end = self._offset + len(self._revisions)
        return self._offset <= start and end <= local_end

    def set_page(self, page_index: int) -> PageWindow:
        """Move to a page and return its window.

        Requests past either end are clamped to the nearest valid page.
        """
        clamped = self.clamp(page_index)
        if clamped != page_index:
            logger.debug(f"Clamped page request {page_index} to {clamped}")
        self._page_index = clamped
        return self.window()

    def window(self) -> PageWindow:
        start, end = self.page_bounds(self._page_index)
        loaded = self.is_page_loaded(self._page_index)
        revisions = (
            self._revisions[start - self._offset : end - self._offset]
            if loaded and end > start
            else []
        )
        return PageWindow(
            page_index=self._page_index,
            page_size=self._page_size,
            total_count=self._total_count,
            revisions=revisions,
            is_loaded=loaded,
        )


def _validate_page_size(page_size: int) -> int:
    if page_size <= 0:
        raise ValueError(f"Page size must be > 0, got {page_size}")
    return page_size
