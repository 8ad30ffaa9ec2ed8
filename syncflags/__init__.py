"""syncflags: resolve sync daemon flags from the issue database config table.

Usage:
    from syncflags import resolve

    if resolve(".beads/beads.db", "auto_commit"):
        ...
"""

from syncflags.resolver import (
    NAMESPACES,
    ConfigResolver,
    FlagResolution,
    FlagState,
    StoreErrorPolicy,
    parse_bool,
    resolve,
    resolve_flag,
    resolve_from_store,
)

__all__ = [
    "NAMESPACES",
    "ConfigResolver",
    "FlagResolution",
    "FlagState",
    "StoreErrorPolicy",
    "parse_bool",
    "resolve",
    "resolve_flag",
    "resolve_from_store",
]
