"""Tagged outcomes returned by the identity use cases.

Expected business conditions come back as a failed Result with an
ErrorReason. Infrastructure faults are raised, not wrapped.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorReason(str, Enum):
    """Why a use case did not succeed."""

    ALREADY_EXISTS = "ALREADY_EXISTS"
    NOT_FOUND = "NOT_FOUND"
    INVALID_CREDENTIAL = "INVALID_CREDENTIAL"
    ROLE_MISSING = "ROLE_MISSING"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Success, partial success, or failure with a reason.

    A partial success is still a success: ``is_success`` is True and
    ``value`` is set, but a related record could not be created.
    """

    is_success: bool
    value: T | None = None
    error: ErrorReason | None = None
    is_partial: bool = False

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(is_success=True, value=value)

    @classmethod
    def partial_success(cls, value: T) -> "Result[T]":
        return cls(is_success=True, value=value, is_partial=True)

    @classmethod
    def failure(cls, error: ErrorReason) -> "Result[T]":
        return cls(is_success=False, error=error)

    @property
    def is_failure(self) -> bool:
        return not self.is_success
