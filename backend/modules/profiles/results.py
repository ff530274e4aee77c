"""
Outcome of a store mutation.

Identifier-keyed mutations report lookup misses instead of raising. A caller
that wants the old silent behavior ignores the result; a stricter caller
calls ``raise_for_error()``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from shared.exceptions import LinkoraError


class StoreStatus(str, Enum):
    """What happened to a mutation."""

    APPLIED = "applied"
    NOT_FOUND = "not_found"
    NO_PROFILE = "no_profile"
    NO_USER = "no_user"
    OUT_OF_RANGE = "out_of_range"
    LIMIT_REACHED = "limit_reached"


@dataclass(frozen=True)
class StoreResult:
    """
    Status of a mutation, plus the created/updated entity when applied.

    ``error`` holds the exception describing a failure. It is never raised
    by the store itself.
    """

    status: StoreStatus
    value: Any = None
    error: Optional[LinkoraError] = None

    @property
    def ok(self) -> bool:
        return self.status == StoreStatus.APPLIED

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_error(self) -> "StoreResult":
        """Raise the failure's exception, or return self when applied."""
        if self.error is not None:
            raise self.error
        return self

    @classmethod
    def applied(cls, value: Any = None) -> "StoreResult":
        return cls(StoreStatus.APPLIED, value=value)

    @classmethod
    def failed(cls, status: StoreStatus, error: LinkoraError) -> "StoreResult":
        return cls(status, error=error)
