"""Helpers for locating the local server port and remote databases in the sync folder."""

from __future__ import annotations

import logging
import tomllib
from os import PathLike
from pathlib import Path

from awkit.dirs import get_sync_dir

logger = logging.getLogger(__name__)

DEFAULT_PORT = 5601
DEFAULT_TESTING_PORT = 5667


def get_server_port(config_path: str | PathLike[str] | None, testing: bool) -> int:
    """The port of the local server, read from its TOML config if present.

    Falls back to 5601, or 5667 when ``testing``, if the file or its integer
    ``port`` entry is missing. A malformed file raises ``tomllib.TOMLDecodeError``.
    """
    fallback = DEFAULT_TESTING_PORT if testing else DEFAULT_PORT
    if config_path is None:
        return fallback
    path = Path(config_path)
    if not path.exists():
        return fallback
    with path.open("rb") as fh:
        config = tomllib.load(fh)
    port = config.get("port")
    if isinstance(port, int) and not isinstance(port, bool):
        return port & 0xFFFF
    return fallback


def _is_db_file(path: Path) -> bool:
    return path.suffix == ".db"


def _contains_db_file(directory: Path) -> bool:
    try:
        return any(_is_db_file(entry) for entry in directory.iterdir())
    except OSError:
        return False


def _contains_subdir_with_db_file(directory: Path) -> bool:
    try:
        return any(entry.is_dir() and _contains_db_file(entry) for entry in directory.iterdir())
    except OSError:
        return False


def get_remotes() -> list[str]:
    """Names of the hosts in the sync folder laid out as ``{host}/{device_id}/*.db``.

    The sync folder is created if it does not exist.
    """
    root = get_sync_dir()
    root.mkdir(parents=True, exist_ok=True)
    hostnames = sorted(
        entry.name
        for entry in root.iterdir()
        if entry.is_dir() and _contains_subdir_with_db_file(entry)
    )
    logger.info("Found remotes: %s", hostnames)
    return hostnames


def find_remotes(sync_directory: str | PathLike[str]) -> list[Path]:
    """All ``.db`` files one directory level below ``sync_directory``."""
    return sorted(
        path
        for subdir in Path(sync_directory).iterdir()
        if subdir.is_dir()
        for path in subdir.iterdir()
        if _is_db_file(path)
    )


def find_remotes_nonlocal(
    sync_directory: str | PathLike[str],
    device_id: str,
    sync_db: str | PathLike[str] | None,
) -> list[Path]:
    """Remote databases whose path does not mention ``device_id``.

    If ``sync_db`` is given, only databases at or below that path are returned.
    """
    restrict = Path(sync_db) if sync_db is not None else None
    return [
        path
        for path in find_remotes(sync_directory)
        if device_id not in str(path)
        and (restrict is None or path.is_relative_to(restrict))
    ]