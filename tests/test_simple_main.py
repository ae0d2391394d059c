"""Tests for the command line entry point."""

from unittest.mock import patch

import pytest

from collab_history import simple_main
from collab_history.argparsers.main_parser import create_main_parser
from collab_history.cloud.revisions_client import CollabRevisionsClient
from collab_history.services.in_memory import InMemoryRevisionsService
from collab_history.stores.history_settings import HistorySettings


def _args(*argv: str):
    return create_main_parser().parse_args(list(argv))


class TestBuildService:
    def test_demo_uses_in_memory_history(self):
        service = simple_main.build_service(_args("--demo"), HistorySettings())

        assert isinstance(service, InMemoryRevisionsService)
        assert len(service.revisions) > 0

    def test_server_mode_requires_api_key(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            simple_main.build_service(_args("--project", "game"), HistorySettings())

        assert exc_info.value.code == 2
        assert "COLLAB_API_KEY" in capsys.readouterr().err

    def test_server_mode_requires_project(self, monkeypatch):
        monkeypatch.setenv("COLLAB_API_KEY", "key")

        with pytest.raises(SystemExit):
            simple_main.build_service(_args(), HistorySettings())

    def test_server_mode_builds_client(self, monkeypatch):
        monkeypatch.setenv("COLLAB_API_KEY", "key")
        monkeypatch.setenv("COLLAB_SERVER_URL", "https://env.example.com")

        service = simple_main.build_service(
            _args(), HistorySettings(project_id="from-settings")
        )

        assert isinstance(service, CollabRevisionsClient)
        assert service.project_id == "from-settings"
        assert service.server_url == "https://env.example.com"

    def test_command_line_server_url_wins(self, monkeypatch):
        monkeypatch.setenv("COLLAB_API_KEY", "key")

        service = simple_main.build_service(
            _args("--project", "game", "--server-url", "https://cli.example.com/"),
            HistorySettings(),
        )

        assert service.server_url == "https://cli.example.com"


class TestMain:
    def test_invalid_page_size_exits(self, capsys):
        with patch("sys.argv", ["collab-history", "--demo", "--page-size", "0"]):
            with pytest.raises(SystemExit) as exc_info:
                simple_main.main()

        assert exc_info.value.code == 2
        assert "between 1 and 50" in capsys.readouterr().err

    def test_runs_app_with_page_size_override(self):
        with (
            patch("sys.argv", ["collab-history", "--demo", "--page-size", "8"]),
            patch("collab_history.tui.textual_app.CollabHistoryApp") as app_cls,
        ):
            simple_main.main()

        settings = app_cls.call_args.kwargs["settings"]
        assert settings.items_per_page == 8
        app_cls.return_value.run.assert_called_once_with()

    def test_app_failure_exits_with_error(self, capsys):
        with (
            patch("sys.argv", ["collab-history", "--demo"]),
            patch("collab_history.tui.textual_app.CollabHistoryApp") as app_cls,
        ):
            app_cls.return_value.run.side_effect = RuntimeError("boom")
            with pytest.raises(SystemExit) as exc_info:
                simple_main.main()

        assert exc_info.value.code == 1
        assert "boom" in capsys.readouterr().err


def test_debug_logging_writes_to_persistence_dir(
    monkeypatch, isolated_persistence_dir
):
    monkeypatch.setenv("DEBUG", "true")

    with patch("logging.basicConfig") as basic_config:
        simple_main.setup_logging()

    assert basic_config.call_args.kwargs["level"] == 10
    assert (isolated_persistence_dir / "logs").is_dir()
