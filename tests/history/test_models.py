"""Tests for revision records and history items."""

from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from collab_history.history.actions import RevisionActions
from collab_history.history.models import (
    HistoryItem,
    RevisionClassification,
    RevisionData,
    classify,
)
from tests.helpers import DAY_ONE, make_revision


class TestClassify:
    @pytest.mark.parametrize(
        "is_current,is_obtained,expected",
        [
            (True, True, RevisionClassification.CURRENT),
            (True, False, RevisionClassification.CURRENT),
            (False, True, RevisionClassification.OBTAINED),
            (False, False, RevisionClassification.ABSENT),
        ],
    )
    def test_current_takes_priority(self, is_current, is_obtained, expected):
        assert classify(is_current, is_obtained) == expected


class TestRevisionData:
    def test_is_immutable(self):
        revision = make_revision("r1", DAY_ONE)
        with pytest.raises(ValidationError):
            revision.is_current = True  # type: ignore[misc]

    @pytest.mark.parametrize(
        "overrides",
        [
            {"index": -1},
            {"revision_id": ""},
        ],
    )
    def test_rejects_malformed_records(self, overrides):
        fields = {"index": 0, "timestamp": DAY_ONE, "revision_id": "r1"} | overrides
        with pytest.raises(ValidationError):
            RevisionData(**fields)


class TestHistoryItem:
    def _item(self, **action_overrides) -> tuple[HistoryItem, RevisionActions]:
        actions = RevisionActions(
            go_back=Mock(),
            update_to=Mock(),
            restore=Mock(),
            show_build=Mock(),
            show_services=Mock(),
            **action_overrides,
        )
        revision = make_revision("r7", DAY_ONE, index=7, obtained=True)
        return HistoryItem.from_revision(revision, actions), actions

    def test_derives_identity_from_revision(self):
        item, _ = self._item()

        assert item.revision_id == "r7"
        assert item.display_index == 7
        assert item.classification == RevisionClassification.OBTAINED
        assert not item.is_in_progress
        assert not item.actions_enabled

    @pytest.mark.parametrize("action", ["go_back", "update_to", "restore"])
    def test_revision_actions_forward_revision_id_when_enabled(self, action):
        item, actions = self._item()
        item.actions_enabled = True

        assert getattr(item, action)() is True
        getattr(actions, action).assert_called_once_with("r7")

    @pytest.mark.parametrize("action", ["go_back", "update_to", "restore"])
    def test_revision_actions_ignored_when_disabled(self, action):
        item, actions = self._item()

        assert getattr(item, action)() is False
        getattr(actions, action).assert_not_called()

    def test_show_build_and_services_are_never_gated(self):
        item, actions = self._item()

        assert item.show_build() is True
        assert item.show_services() is True
        actions.show_build.assert_called_once_with("r7")
        actions.show_services.assert_called_once_with()

    def test_item_without_actions_does_nothing(self):
        item = HistoryItem.from_revision(make_revision("r1", DAY_ONE))
        item.actions_enabled = True

        assert item.restore() is False
        assert item.show_build() is False
