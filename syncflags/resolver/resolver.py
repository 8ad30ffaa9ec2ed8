"""Flag resolver.

Reads a boolean flag from the config store, trying the documented
``sync.`` namespace before the legacy ``daemon.`` one. The first namespace
holding a non-empty value decides; when none does the flag is off.
"""

from collections.abc import Callable
from functools import partial
from pathlib import Path

from syncflags.config import get_settings
from syncflags.config.settings import Settings
from syncflags.db.errors import StoreError
from syncflags.observability.logging import get_logger
from syncflags.observability.metrics import FLAG_RESOLUTIONS, setting_label
from syncflags.resolver.errors import InvalidSettingNameError
from syncflags.resolver.models import FlagResolution, FlagState, StoreErrorPolicy
from syncflags.resolver.parsing import parse_bool
from syncflags.storage.store import ConfigStore
from syncflags.storage.stores.sqlite import DEFAULT_BUSY_TIMEOUT, SQLiteConfigStore

logger = get_logger(__name__)

# Highest priority first. Add legacy aliases at the end.
NAMESPACES: tuple[str, ...] = ("sync.", "daemon.")

StoreOpener = Callable[[Path], ConfigStore]


def _check_setting(setting: str) -> None:
    if not setting:
        raise InvalidSettingNameError("Setting name must be non-empty")


def resolve_from_store(store: ConfigStore, setting: str) -> FlagResolution:
    """Resolve a flag against an already-open store.

    The store is borrowed: it is not closed here.

    Raises:
        InvalidSettingNameError: If setting is empty
        StoreError: If the store fails while reading
    """
    _check_setting(setting)

    for namespace in NAMESPACES:
        key = namespace + setting
        value = store.get_config(key)
        if value:
            return FlagResolution(
                setting=setting,
                state=FlagState.ENABLED if parse_bool(value) else FlagState.DISABLED,
                source_key=key,
                raw_value=value,
            )

    return FlagResolution(setting=setting, state=FlagState.DISABLED)


class ConfigResolver:
    """Resolves flags from a store opened by path.

    Every call opens its own handle and closes it before returning, so one
    resolver may be shared between threads.
    """

    def __init__(
        self,
        opener: StoreOpener | None = None,
        *,
        policy: StoreErrorPolicy = StoreErrorPolicy.FAIL_CLOSED,
        busy_timeout: float = DEFAULT_BUSY_TIMEOUT,
        record_metrics: bool = True,
    ) -> None:
        """Create a resolver.

        Args:
            opener: Opens a store handle for a path. Defaults to a
                read-only SQLite handle.
            policy: What resolve() does when the store is unavailable
            busy_timeout: Lock wait for the default SQLite opener, in seconds
            record_metrics: Count resolutions in FLAG_RESOLUTIONS
        """
        self._opener = opener or partial(
            SQLiteConfigStore.open, read_only=True, busy_timeout=busy_timeout
        )
        self._policy = policy
        self._record_metrics = record_metrics

    @classmethod
    def from_settings(
        cls, settings: Settings, opener: StoreOpener | None = None
    ) -> "ConfigResolver":
        """Build a resolver from application settings."""
        return cls(
            opener,
            policy=StoreErrorPolicy(settings.resolver.store_error_policy),
            busy_timeout=settings.storage.busy_timeout,
            record_metrics=settings.observability.metrics.enabled,
        )

    @property
    def policy(self) -> StoreErrorPolicy:
        return self._policy

    def resolve_flag(self, store_path: str | Path, setting: str) -> FlagResolution:
        """Resolve a flag, reporting store failures in the result.

        Raises:
            InvalidSettingNameError: If setting is empty
        """
        _check_setting(setting)

        try:
            with self._opener(Path(store_path)) as store:
                resolution = resolve_from_store(store, setting)
        except StoreError as e:
            resolution = FlagResolution(
                setting=setting, state=FlagState.STORE_ERROR, error=e
            )

        logger.debug(
            "flag_resolved",
            setting=setting,
            state=resolution.state.value,
            source_key=resolution.source_key,
        )
        if self._record_metrics:
            FLAG_RESOLUTIONS.labels(
                setting=setting_label(setting),
                state=resolution.state.value,
                namespace=resolution.namespace or "default",
            ).inc()
        return resolution

    def resolve(self, store_path: str | Path, setting: str) -> bool:
        """Resolve a flag to a boolean.

        Raises:
            InvalidSettingNameError: If setting is empty
            StoreError: If the store is unavailable and the policy is
                FAIL_CLOSED
        """
        resolution = self.resolve_flag(store_path, setting)
        if resolution.state != FlagState.STORE_ERROR or resolution.error is None:
            return resolution.enabled

        if self._policy == StoreErrorPolicy.FAIL_CLOSED:
            raise resolution.error

        logger.warning(
            "flag_store_unavailable_fail_open",
            setting=setting,
            path=str(store_path),
            error=str(resolution.error),
        )
        return False


def default_resolver() -> ConfigResolver:
    """Build a resolver from the current settings.

    Built per call so reload_settings() and env changes take effect.
    """
    return ConfigResolver.from_settings(get_settings())


def resolve_flag(store_path: str | Path, setting: str) -> FlagResolution:
    """Resolve a flag with the settings-configured SQLite resolver."""
    return default_resolver().resolve_flag(store_path, setting)


def resolve(store_path: str | Path, setting: str) -> bool:
    """Resolve a flag with the settings-configured resolver.

    Raises:
        StoreError: If the store is unavailable and
            resolver.store_error_policy is "fail_closed"
    """
    return default_resolver().resolve(store_path, setting)
