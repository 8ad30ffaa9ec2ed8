"""ConfigStore implementations."""

from syncflags.storage.stores.inmemory import InMemoryConfigStore
from syncflags.storage.stores.sqlite import SQLiteConfigStore

__all__ = ["InMemoryConfigStore", "SQLiteConfigStore"]
