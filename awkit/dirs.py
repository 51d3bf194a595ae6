"""Locations of the configuration and sync directories."""

from __future__ import annotations

import os
from pathlib import Path

import platformdirs

SYNC_DIR_ENV = "AW_SYNC_DIR"


def get_config_dir() -> Path:
    """The sync configuration directory, created if missing."""
    base = Path(platformdirs.user_config_dir("activitywatch", appauthor=False))
    directory = base / "aw-sync"
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def get_sync_dir() -> Path:
    """The sync directory: ``$AW_SYNC_DIR`` if set, else ``~/ActivityWatchSync``."""
    configured = os.environ.get(SYNC_DIR_ENV)
    if configured is not None:
        return Path(configured)
    return Path.home() / "ActivityWatchSync"