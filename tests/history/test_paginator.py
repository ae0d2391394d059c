"""Tests for the fixed-size page window over the revision stream."""

from datetime import timedelta

import pytest

from collab_history.history.paginator import DEFAULT_PAGE_SIZE, Paginator
from tests.helpers import DAY_ONE, make_history


def _history(count: int):
    return make_history([DAY_ONE - timedelta(hours=i) for i in range(count)])


class TestPageBounds:
    def test_defaults(self):
        paginator = Paginator()

        assert paginator.page_size == DEFAULT_PAGE_SIZE
        assert paginator.page_index == 0
        assert paginator.page_count == 1
        assert paginator.last_page == 0

    @pytest.mark.parametrize(
        "total,page_size,expected_last",
        [(0, 5, 0), (1, 5, 0), (5, 5, 0), (6, 5, 1), (17, 5, 3), (20, 5, 3)],
    )
    def test_last_page_uses_ceiling(self, total, page_size, expected_last):
        paginator = Paginator(page_size)
        paginator.set_total_count(total)

        assert paginator.last_page == expected_last

    @pytest.mark.parametrize("page_size", [0, -3])
    def test_rejects_non_positive_page_size(self, page_size):
        with pytest.raises(ValueError):
            Paginator(page_size)

    def test_rejects_negative_total(self):
        with pytest.raises(ValueError):
            Paginator().set_total_count(-1)


class TestSetPage:
    def test_clamps_past_last_page(self):
        revisions = _history(17)
        paginator = Paginator(5)
        paginator.set_total_count(17)
        paginator.set_revisions(revisions)

        window = paginator.set_page(10)

        assert window.page_index == 3
        assert window.revisions == revisions[15:17]
        assert window.is_loaded

    def test_clamps_negative_page(self):
        paginator = Paginator(5)
        paginator.set_revisions(_history(12))

        assert paginator.set_page(-4).page_index == 0

    def test_slices_full_pages(self):
        revisions = _history(12)
        paginator = Paginator(5)
        paginator.set_revisions(revisions)

        assert paginator.set_page(1).revisions == revisions[5:10]
        assert paginator.total_count == 12

    def test_empty_stream_gives_empty_loaded_window(self):
        window = Paginator(5).set_page(0)

        assert window.revisions == []
        assert window.total_count == 0
        assert window.is_loaded

    def test_page_outside_local_run_is_not_loaded(self):
        revisions = _history(5)
        paginator = Paginator(5)
        paginator.set_total_count(23)
        paginator.set_revisions(revisions, offset=5)

        assert paginator.local_count == 5
        assert paginator.is_page_loaded(1)
        assert not paginator.is_page_loaded(0)
        assert not paginator.is_page_loaded(2)

        window = paginator.set_page(2)
        assert window.revisions == []
        assert not window.is_loaded

    def test_local_run_never_shrinks_total(self):
        paginator = Paginator(5)
        paginator.set_total_count(3)
        paginator.set_revisions(_history(7))

        assert paginator.total_count == 7

    def test_empty_run_keeps_reported_total(self):
        paginator = Paginator(5)
        paginator.set_total_count(0)
        paginator.set_revisions([], offset=15)

        window = paginator.set_page(3)

        assert paginator.total_count == 0
        assert (window.page_index, window.revisions, window.is_loaded) == (0, [], True)


class TestSetPageSize:
    def test_unchanged_size_is_noop(self):
        paginator = Paginator(5)

        assert paginator.set_page_size(5) is False

    def test_keeps_first_visible_revision_on_screen(self):
        paginator = Paginator(5)
        paginator.set_revisions(_history(30))
        paginator.set_page(3)  # revisions 15..19

        assert paginator.set_page_size(10) is True
        assert paginator.page_index == 1  # revisions 10..19

    def test_shrinking_total_clamps_current_page(self):
        paginator = Paginator(5)
        paginator.set_total_count(30)
        paginator.set_page(5)

        paginator.set_total_count(8)

        assert paginator.page_index == 1
