"""Identity domain exceptions."""

from uuid import UUID

from donare_identity.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_EMAIL)


class InvalidRegionError(ValidationError):
    """Raised when a region code is not two upper-case letters."""

    def __init__(self, region: str) -> None:
        super().__init__(
            f"Invalid region code: {region}",
            ErrorCode.INVALID_FORMAT,
            {"region": region},
        )


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"Email already registered: {email}",
            ErrorCode.EMAIL_ALREADY_REGISTERED,
        )


class IdentityNotFoundError(EntityNotFoundError):
    """Identity not found."""

    def __init__(self, identity_id: UUID | str) -> None:
        self.identity_id = identity_id
        super().__init__(
            f"Identity not found: {identity_id}",
            ErrorCode.IDENTITY_NOT_FOUND,
        )
