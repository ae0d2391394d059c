#!/usr/bin/env python3
"""Entry point for the Collab History viewer."""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from collab_history.argparsers.main_parser import create_main_parser
from collab_history.history.protocols import RevisionsService
from collab_history.locations import get_persistence_dir
from collab_history.stores.history_settings import HistorySettings


def is_debug_enabled() -> bool:
    return os.getenv("DEBUG", "false").lower() in ("1", "true")


def setup_logging() -> None:
    """Route logging away from the terminal, which the TUI owns.

    With DEBUG set, logs go to a timestamped file in the persistence
    directory; otherwise they are discarded.
    """
    if is_debug_enabled():
        log_dir = Path(get_persistence_dir()) / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d-%H%M")
        log_file = log_dir / f"collab_history_{timestamp}.log"
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[logging.FileHandler(log_file)],
        )
        logging.getLogger(__name__).info(f"Debug mode enabled, logging to {log_file}")
    else:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[logging.StreamHandler(open(os.devnull, "w"))],
        )


def build_service(args, settings: HistorySettings) -> RevisionsService:
    """Create the revisions service selected on the command line.

    Raises:
        SystemExit: If the server mode lacks a project or an API key.
    """
    if args.demo:
        from collab_history.services.in_memory import (
            InMemoryRevisionsService,
            demo_revisions,
        )

        return InMemoryRevisionsService(demo_revisions())

    project_id = args.project or settings.project_id
    api_key = os.getenv("COLLAB_API_KEY")
    if not project_id or not api_key:
        print(
            "Error: --project (or project_id in settings) and COLLAB_API_KEY are "
            "required unless --demo is given",
            file=sys.stderr,
        )
        raise SystemExit(2)

    from collab_history.cloud.revisions_client import CollabRevisionsClient

    return CollabRevisionsClient(
        args.server_url or settings.effective_server_url, api_key, project_id
    )


def main() -> None:
    """Main entry point for the Collab History viewer."""
    parser = create_main_parser()
    args = parser.parse_args()
    setup_logging()

    settings = HistorySettings.load()
    if args.page_size is not None:
        try:
            settings = HistorySettings.model_validate(
                {**settings.model_dump(), "items_per_page": args.page_size}
            )
        except ValidationError as e:
            print(f"Error: {e.errors()[0]['msg']}", file=sys.stderr)
            raise SystemExit(2)

    service = build_service(args, settings)

    from collab_history.tui.textual_app import CollabHistoryApp

    try:
        CollabHistoryApp(service=service, settings=settings).run()
    except KeyboardInterrupt:
        print("\nGoodbye! 👋")
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if is_debug_enabled():
            import traceback

            traceback.print_exc()
        raise SystemExit(1)


if __name__ == "__main__":
    main()
