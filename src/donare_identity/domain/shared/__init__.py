"""Shared domain building blocks."""

from donare_identity.domain.shared.exceptions import (
    AuthenticationFailedError,
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from donare_identity.domain.shared.time import today_utc, utc_now

__all__ = [
    "AuthenticationFailedError",
    "BusinessRuleViolation",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ValidationError",
    "today_utc",
    "utc_now",
]
