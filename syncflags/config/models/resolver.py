"""Flag resolver configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

StoreErrorPolicyName = Literal["fail_closed", "fail_open"]


class ResolverConfig(BaseModel):
    """Configuration for flag resolution.

    The namespace order is fixed in code and deliberately not configurable.
    """

    store_error_policy: StoreErrorPolicyName = Field(
        default="fail_closed",
        description=(
            "What resolve() does when the store cannot be opened: "
            "'fail_closed' raises, 'fail_open' returns False"
        ),
    )
