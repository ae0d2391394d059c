import os


# Base directory for user settings and debug logs
PERSISTENCE_DIR = os.environ.get(
    "COLLAB_HISTORY_DIR", os.path.expanduser("~/.collab_history")
)

SETTINGS_FILENAME = "history_config.json"


def get_persistence_dir() -> str:
    """Return the persistence directory, honouring late env overrides."""
    return os.environ.get("COLLAB_HISTORY_DIR", PERSISTENCE_DIR)
