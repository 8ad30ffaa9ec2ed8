"""In-memory implementation of ConfigStore."""

from collections.abc import Mapping

from syncflags.storage.store import ConfigStore


class InMemoryConfigStore(ConfigStore):
    """In-memory implementation of ConfigStore for testing and development.

    Uses simple dict storage. Nothing survives the process.
    """

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        """Initialize storage, optionally seeded with entries."""
        self._entries: dict[str, str] = dict(entries or {})
        self._closed = False

    def get_config(self, key: str) -> str | None:
        """Get the raw value for key, or None if the key is absent."""
        self._check_open()
        return self._entries.get(key)

    def set_config(self, key: str, value: str) -> None:
        """Insert or overwrite a single entry."""
        self._check_open()
        self._entries[key] = value

    def delete_config(self, key: str) -> bool:
        """Delete an entry, returning whether it existed."""
        self._check_open()
        return self._entries.pop(key, None) is not None

    def get_all_config(self) -> dict[str, str]:
        """Get a copy of every entry."""
        self._check_open()
        return dict(self._entries)

    def close(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed
