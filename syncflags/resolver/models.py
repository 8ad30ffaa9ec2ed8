"""Models for flag resolution results."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from syncflags.db.errors import StoreError


class FlagState(str, Enum):
    """Outcome of resolving a flag.

    - ENABLED: a namespace held "true"
    - DISABLED: a namespace held another value, or nothing was configured
    - STORE_ERROR: the store could not be opened or read
    """

    ENABLED = "enabled"
    DISABLED = "disabled"
    STORE_ERROR = "store_error"


class StoreErrorPolicy(str, Enum):
    """How the boolean resolve() treats a STORE_ERROR outcome.

    - FAIL_CLOSED: raise the underlying StoreError
    - FAIL_OPEN: treat the flag as disabled
    """

    FAIL_CLOSED = "fail_closed"
    FAIL_OPEN = "fail_open"


class FlagResolution(BaseModel):
    """Tagged result of resolving a single flag.

    Keeps "not configured" apart from "could not read config" so callers
    can choose between failing open and aborting startup.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    setting: str = Field(..., description="Setting name without namespace")
    state: FlagState
    source_key: str | None = Field(
        default=None,
        description="Full key that decided the value; None for the default",
    )
    raw_value: str | None = Field(default=None, description="Stored value as read")
    error: StoreError | None = Field(
        default=None,
        description="Store failure when state is STORE_ERROR",
    )

    @property
    def enabled(self) -> bool:
        return self.state == FlagState.ENABLED

    @property
    def namespace(self) -> str | None:
        """Namespace prefix of source_key, e.g. "sync."."""
        if self.source_key is None:
            return None
        return self.source_key[: len(self.source_key) - len(self.setting)]
