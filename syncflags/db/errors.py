"""Store error hierarchy for config store backends.

All store implementations must raise these errors for consistent error handling.
"""


class StoreError(Exception):
    """Base exception for all store errors.

    All store implementations should wrap backend-specific errors
    in one of the StoreError subclasses.
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class StoreUnavailableError(StoreError):
    """Raised when the store cannot be opened or read.

    Examples:
        - Database file does not exist
        - File is not a SQLite database
        - The config table is missing
        - Permission denied or I/O error
    """

    pass


class StoreClosedError(StoreError):
    """Raised when an operation is attempted on a closed store handle."""

    pass


class ReadOnlyStoreError(StoreError):
    """Raised when writing through a handle opened read-only."""

    pass
