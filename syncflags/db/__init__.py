"""Database utilities for syncflags.

This module contains the store error hierarchy shared by all
config store backends.
"""

from syncflags.db.errors import (
    ReadOnlyStoreError,
    StoreClosedError,
    StoreError,
    StoreUnavailableError,
)

__all__ = [
    "StoreError",
    "StoreUnavailableError",
    "StoreClosedError",
    "ReadOnlyStoreError",
]
