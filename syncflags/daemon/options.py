"""Sync options the daemon reads at startup."""

from pathlib import Path

from pydantic import BaseModel, Field

from syncflags.observability.logging import get_logger
from syncflags.resolver.resolver import ConfigResolver, default_resolver

logger = get_logger(__name__)

AUTO_COMMIT = "auto_commit"
AUTO_PUSH = "auto_push"


class DaemonSyncOptions(BaseModel):
    """Flags controlling what the daemon does after an export."""

    auto_commit: bool = Field(default=False, description="Commit exported changes")
    auto_push: bool = Field(default=False, description="Push after committing")


def load_daemon_options(
    store_path: str | Path,
    *,
    auto_commit: bool | None = None,
    auto_push: bool | None = None,
    resolver: ConfigResolver | None = None,
) -> DaemonSyncOptions:
    """Load daemon sync options.

    Explicit arguments (the daemon's command-line flags) win. Options left
    as None are resolved from the config store, using a resolver built from
    the current settings unless one is given.

    Raises:
        StoreError: If a lookup is needed, the store is unavailable and the
            resolver fails closed
    """
    resolver = resolver or default_resolver()

    if auto_commit is None:
        auto_commit = resolver.resolve(store_path, AUTO_COMMIT)
    if auto_push is None:
        auto_push = resolver.resolve(store_path, AUTO_PUSH)

    options = DaemonSyncOptions(auto_commit=auto_commit, auto_push=auto_push)
    logger.info(
        "daemon_sync_options_loaded",
        auto_commit=options.auto_commit,
        auto_push=options.auto_push,
    )
    return options
