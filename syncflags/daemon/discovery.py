"""Locate the issue database for the current workspace."""

from pathlib import Path

from syncflags.config import get_settings
from syncflags.config.settings import Settings
from syncflags.observability.logging import get_logger

logger = get_logger(__name__)


def find_store_path(
    start: str | Path | None = None,
    *,
    settings: Settings | None = None,
) -> Path | None:
    """Find the database file for a workspace.

    An explicit ``storage.path`` setting wins. Otherwise walks up from
    ``start`` (default: cwd) looking for ``<dirname>/<filename>``, checking
    at most ``storage.search_depth`` directories.

    Returns:
        Path to the database file, or None if none was found
    """
    storage = (settings or get_settings()).storage
    if storage.path is not None:
        return storage.path

    current = Path(start) if start is not None else Path.cwd()
    current = current.resolve()
    for _ in range(storage.search_depth):
        candidate = current / storage.dirname / storage.filename
        if candidate.is_file():
            logger.debug("config_store_found", path=str(candidate))
            return candidate
        if current.parent == current:
            break
        current = current.parent

    logger.debug("config_store_not_found", start=str(start or Path.cwd()))
    return None
