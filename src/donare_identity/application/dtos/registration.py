"""Registration input.

The role is not a separate field: it is the type of ``profile``. A
request without profile data has no role.
"""

from dataclasses import dataclass
from datetime import date
from typing import Union

from donare_identity.domain.identity import IdentityRole
from donare_identity.domain.profiles import BloodType


@dataclass(frozen=True)
class DonorProfileData:
    tax_id: str
    blood_type: Union[str, BloodType]
    birth_date: date

    role = IdentityRole.DONOR


@dataclass(frozen=True)
class CompanyProfileData:
    tax_id: str
    institution_name: str
    facility_code: str

    role = IdentityRole.COMPANY


ProfileData = Union[DonorProfileData, CompanyProfileData]


@dataclass(frozen=True)
class RegistrationRequest:
    """Common account fields plus the role-tagged profile data."""

    email: str
    password: str | None
    name: str
    city: str
    region: str
    postal_code: str | None = None
    profile: ProfileData | None = None

    @property
    def role(self) -> IdentityRole | None:
        return self.profile.role if self.profile is not None else None

    def __repr__(self) -> str:
        return (
            f"RegistrationRequest(email={self.email!r}, role="
            f"{self.role.value if self.role else None})"
        )
