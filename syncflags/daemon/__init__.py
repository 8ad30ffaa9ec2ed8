"""Daemon-side helpers: locating the issue database and loading sync options."""

from syncflags.daemon.discovery import find_store_path
from syncflags.daemon.options import DaemonSyncOptions, load_daemon_options
from syncflags.daemon.startup import load_startup_options

__all__ = [
    "DaemonSyncOptions",
    "find_store_path",
    "load_daemon_options",
    "load_startup_options",
]
