"""Main argument parser for the Collab History viewer."""

import argparse

from collab_history import __version__


def create_main_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="collab-history",
        description="Browse the collaborative revision history of a project.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  collab-history --demo                 # Browse a generated sample history
  collab-history --project my-game      # Browse a project on the server
  collab-history --page-size 10         # Show ten revisions per page
""",
    )
    parser.add_argument(
        "--version", "-v", action="version", version=f"collab-history {__version__}"
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Use a generated in-memory history instead of the server",
    )
    parser.add_argument(
        "--server-url",
        type=str,
        help="Collaboration server URL (defaults to settings or COLLAB_SERVER_URL)",
    )
    parser.add_argument(
        "--project",
        type=str,
        help="Project identifier on the collaboration server",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        help="Number of revisions per page",
    )
    return parser
