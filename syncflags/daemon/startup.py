"""Daemon startup: settings, logging, store discovery and sync options."""

from pathlib import Path

from syncflags.config import get_settings
from syncflags.daemon.discovery import find_store_path
from syncflags.daemon.options import DaemonSyncOptions, load_daemon_options
from syncflags.db.errors import StoreUnavailableError
from syncflags.observability.logging import get_logger, setup_logging_from_config
from syncflags.resolver.models import StoreErrorPolicy
from syncflags.resolver.resolver import ConfigResolver

logger = get_logger(__name__)


def load_startup_options(
    start: str | Path | None = None,
    *,
    auto_commit: bool | None = None,
    auto_push: bool | None = None,
) -> DaemonSyncOptions:
    """Prepare the daemon's sync options for the workspace at start.

    Applies the observability.logging settings, locates the issue database
    and resolves any option not given explicitly.

    Raises:
        StoreError: If the database is missing or unreadable and the
            resolver fails closed
    """
    settings = get_settings()
    setup_logging_from_config(settings.observability.logging)

    resolver = ConfigResolver.from_settings(settings)
    store_path = find_store_path(start, settings=settings)
    if store_path is None:
        storage = settings.storage
        error = StoreUnavailableError(
            f"No {storage.dirname}/{storage.filename} found from "
            f"{Path(start) if start is not None else Path.cwd()}"
        )
        if resolver.policy == StoreErrorPolicy.FAIL_CLOSED:
            raise error
        logger.warning("config_store_not_found_fail_open", error=str(error))
        return DaemonSyncOptions(
            auto_commit=bool(auto_commit), auto_push=bool(auto_push)
        )

    return load_daemon_options(
        store_path,
        auto_commit=auto_commit,
        auto_push=auto_push,
        resolver=resolver,
    )
