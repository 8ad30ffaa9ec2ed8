"""Config store: persistent string key/value settings.

The resolver borrows a store handle for the duration of one resolution;
backends live in syncflags.storage.stores.
"""

from syncflags.storage.store import ConfigStore
from syncflags.storage.stores import InMemoryConfigStore, SQLiteConfigStore

__all__ = [
    "ConfigStore",
    "InMemoryConfigStore",
    "SQLiteConfigStore",
]
