"""Role profile exceptions."""

from uuid import UUID

from donare_identity.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidTaxIdError(ValidationError):
    """Raised when a CPF or CNPJ does not have the expected digit count."""

    def __init__(self, value: str, expected_digits: int) -> None:
        super().__init__(
            f"Tax id must have {expected_digits} digits",
            ErrorCode.INVALID_TAX_ID,
            {"value": value},
        )


class InvalidFacilityCodeError(ValidationError):
    """Raised when a CNES health facility code is not 7 digits."""

    def __init__(self, value: str) -> None:
        super().__init__(
            "Health facility code must have 7 digits",
            ErrorCode.INVALID_FORMAT,
            {"value": value},
        )


class InvalidBloodTypeError(ValidationError):
    """Raised for a blood type outside the ABO/Rh combinations."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid blood type: {value}", ErrorCode.INVALID_FORMAT)


class ProfileNotFoundError(EntityNotFoundError):
    """No role profile exists for the given identity."""

    def __init__(self, owner_id: UUID | str) -> None:
        self.owner_id = owner_id
        super().__init__(
            f"Profile not found for identity: {owner_id}",
            ErrorCode.PROFILE_NOT_FOUND,
        )


class ProfileAlreadyExistsError(ConflictError):
    """The identity already has a profile, or the tax id is taken."""

    def __init__(self, owner_id: UUID | str) -> None:
        self.owner_id = owner_id
        super().__init__(
            f"Profile already exists for identity: {owner_id}",
            ErrorCode.PROFILE_ALREADY_EXISTS,
        )
