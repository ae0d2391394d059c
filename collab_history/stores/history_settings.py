"""History viewer settings models and utilities."""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, field_validator

from collab_history.locations import SETTINGS_FILENAME, get_persistence_dir


logger = logging.getLogger(__name__)

# Revisions shown per page in the history list
DEFAULT_ITEMS_PER_PAGE = 5

# Seconds between two session status checks
DEFAULT_SESSION_POLL_INTERVAL = 5.0

DEFAULT_SERVER_URL = "https://collab.example.com"


class HistorySettings(BaseModel):
    """Model for history viewer settings."""

    items_per_page: int = DEFAULT_ITEMS_PER_PAGE
    session_poll_interval: float = DEFAULT_SESSION_POLL_INTERVAL
    server_url: str = DEFAULT_SERVER_URL
    project_id: str | None = None

    @field_validator("items_per_page")
    @classmethod
    def validate_items_per_page(cls, v: int) -> int:
        """Validate that the page size is between 1 and 50."""
        if not 1 <= v <= 50:
            raise ValueError(f"Items per page must be between 1 and 50, got {v}")
        return v

    @field_validator("session_poll_interval")
    @classmethod
    def validate_poll_interval(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Poll interval must be positive, got {v}")
        return v

    @property
    def effective_server_url(self) -> str:
        """Server URL, with COLLAB_SERVER_URL taking precedence."""
        return os.getenv("COLLAB_SERVER_URL", self.server_url)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the path to the settings file."""
        return Path(get_persistence_dir()) / SETTINGS_FILENAME

    @classmethod
    def _migrate_legacy_settings(cls, data: dict) -> tuple[dict, bool]:
        """Rename the legacy `page_size` key to `items_per_page`.

        Returns:
            Tuple of (migrated settings data, bool indicating if migration occurred)
        """
        if "page_size" not in data:
            return data, False

        page_size = data.pop("page_size")
        data.setdefault("items_per_page", page_size)
        return data, True

    @classmethod
    def load(cls) -> "HistorySettings":
        """Load settings from file.

        Returns:
            HistorySettings instance with loaded settings, or defaults if the file
            doesn't exist or cannot be parsed
        """
        config_path = cls.get_config_path()

        if not config_path.exists():
            return cls()

        try:
            with open(config_path) as f:
                data = json.load(f)

            migrated_data, was_migrated = cls._migrate_legacy_settings(data)
            settings = cls.model_validate(migrated_data)

            if was_migrated:
                settings.save()

            return settings
        except (json.JSONDecodeError, ValueError, AttributeError, TypeError) as e:
            logger.warning(f"Ignoring unreadable settings file {config_path}: {e}")
            return cls()

    def save(self) -> None:
        """Save settings to file."""
        config_path = self.get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)
