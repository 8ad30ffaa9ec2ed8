"""Configuration model exports.

    from syncflags.config.models import ResolverConfig, StorageConfig
"""

from syncflags.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from syncflags.config.models.resolver import ResolverConfig
from syncflags.config.models.storage import StorageConfig

__all__ = [
    # Observability
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    # Resolver
    "ResolverConfig",
    # Storage
    "StorageConfig",
]
