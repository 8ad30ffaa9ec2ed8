"""Flag resolution over the sync./daemon. config namespaces."""

from syncflags.resolver.errors import InvalidSettingNameError
from syncflags.resolver.models import FlagResolution, FlagState, StoreErrorPolicy
from syncflags.resolver.parsing import parse_bool
from syncflags.resolver.resolver import (
    NAMESPACES,
    ConfigResolver,
    default_resolver,
    resolve,
    resolve_flag,
    resolve_from_store,
)

__all__ = [
    "NAMESPACES",
    "ConfigResolver",
    "FlagResolution",
    "FlagState",
    "InvalidSettingNameError",
    "StoreErrorPolicy",
    "default_resolver",
    "parse_bool",
    "resolve",
    "resolve_flag",
    "resolve_from_store",
]
