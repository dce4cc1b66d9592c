"""Role profiles: donor and company extensions of an Identity."""

from donare_identity.domain.profiles.entities import CompanyProfile, DonorProfile
from donare_identity.domain.profiles.exceptions import (
    InvalidBloodTypeError,
    InvalidFacilityCodeError,
    InvalidTaxIdError,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
)
from donare_identity.domain.profiles.repositories import (
    CompanyProfileRepository,
    DonorProfileRepository,
)
from donare_identity.domain.profiles.value_objects import BloodType

__all__ = [
    "BloodType",
    "CompanyProfile",
    "CompanyProfileRepository",
    "DonorProfile",
    "DonorProfileRepository",
    "InvalidBloodTypeError",
    "InvalidFacilityCodeError",
    "InvalidTaxIdError",
    "ProfileAlreadyExistsError",
    "ProfileNotFoundError",
]
