"""ConfigStore abstract interface."""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self

from syncflags.db.errors import StoreClosedError


class ConfigStore(ABC):
    """Abstract interface for config key/value storage.

    Keys are full keys including their namespace (``sync.auto_commit``).
    Values are opaque strings; interpreting them is the caller's job.
    A handle is usable until ``close()`` and may be used as a context manager.
    """

    @abstractmethod
    def get_config(self, key: str) -> str | None:
        """Get the raw value for key, or None if the key is absent."""
        pass

    @abstractmethod
    def set_config(self, key: str, value: str) -> None:
        """Insert or overwrite a single entry."""
        pass

    @abstractmethod
    def delete_config(self, key: str) -> bool:
        """Delete an entry, returning whether it existed."""
        pass

    @abstractmethod
    def get_all_config(self) -> dict[str, str]:
        """Get every entry in the store."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the handle. Safe to call more than once."""
        pass

    @property
    @abstractmethod
    def closed(self) -> bool:
        """Whether close() has been called."""
        pass

    def _check_open(self) -> None:
        if self.closed:
            raise StoreClosedError(f"{type(self).__name__} is closed")

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
