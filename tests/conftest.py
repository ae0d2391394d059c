import pytest

from tests.helpers import CollectingScheduler, RecordingView


@pytest.fixture(autouse=True)
def isolated_persistence_dir(tmp_path, monkeypatch):
    """Keep settings and logs of every test inside a temporary directory."""
    persistence_dir = tmp_path / "collab_history"
    monkeypatch.setenv("COLLAB_HISTORY_DIR", str(persistence_dir))
    monkeypatch.delenv("COLLAB_SERVER_URL", raising=False)
    monkeypatch.delenv("COLLAB_API_KEY", raising=False)
    return persistence_dir


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def scheduler():
    collecting = CollectingScheduler()
    yield collecting
    collecting.discard_all()
