"""User schemas for request/response models."""

import re
from datetime import date, datetime
from typing import Annotated, Literal, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from donare_identity.application import IdentityView
from donare_identity.domain.profiles import CompanyProfile, DonorProfile

# Lookaheads are not supported by pydantic's `pattern`, so strength is
# checked with `re` in a validator.
PASSWORD_PATTERN = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}$",
)
PASSWORD_RULES = (
    "Password must be at least 8 characters and contain upper-case, "
    "lower-case, a digit and one of @$!%*?&"
)

REGION_PATTERN = r"^[A-Z]{2}$"
CPF_PATTERN = r"^(\d{11}|\d{3}\.\d{3}\.\d{3}-\d{2})$"
CNPJ_PATTERN = r"^(\d{14}|\d{2}\.\d{3}\.\d{3}/\d{4}-\d{2})$"
CNES_PATTERN = r"^\d{7}$"
BLOOD_TYPE_PATTERN = r"^(A|B|AB|O)[+-]$"


def _check_password_strength(value: str) -> str:
    if not PASSWORD_PATTERN.match(value):
        raise ValueError(PASSWORD_RULES)
    return value


class DonorProfileRequest(BaseModel):
    """Donor-specific registration fields."""

    person_type: Literal["DONOR"]
    tax_id: str = Field(..., pattern=CPF_PATTERN, description="CPF")
    blood_type: str = Field(..., pattern=BLOOD_TYPE_PATTERN)
    birth_date: date


class CompanyProfileRequest(BaseModel):
    """Company (health facility) registration fields."""

    person_type: Literal["COMPANY"]
    tax_id: str = Field(..., pattern=CNPJ_PATTERN, description="CNPJ")
    institution_name: str = Field(..., min_length=1, max_length=100)
    facility_code: str = Field(..., pattern=CNES_PATTERN, description="CNES")


ProfileRequest = Annotated[
    Union[DonorProfileRequest, CompanyProfileRequest],
    Field(discriminator="person_type"),
]


class RegisterUserRequest(BaseModel):
    """Request schema for account registration."""

    email: EmailStr
    password: str = Field(..., max_length=128)
    name: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    region: str = Field(..., pattern=REGION_PATTERN, description="State code (UF)")
    postal_code: str | None = Field(default=None, max_length=20)
    profile: ProfileRequest | None = None

    @field_validator("password")
    @classmethod
    def _validate_password(cls, v: str) -> str:
        return _check_password_strength(v)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "d@x.com",
                "password": "Abc12345!",
                "name": "Maria Souza",
                "city": "Recife",
                "region": "PE",
                "postal_code": "50000-000",
                "profile": {
                    "person_type": "DONOR",
                    "tax_id": "111.222.333-44",
                    "blood_type": "O+",
                    "birth_date": "1990-05-15",
                },
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for login."""

    email: EmailStr
    password: str


class ChangePasswordRequest(BaseModel):
    """Request schema for changing a password."""

    current_password: str
    new_password: str = Field(..., max_length=128)

    @field_validator("new_password")
    @classmethod
    def _validate_new_password(cls, v: str) -> str:
        return _check_password_strength(v)


class UpdateUserRequest(BaseModel):
    """Partial update of contact fields; omitted fields stay as they are."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    city: str | None = Field(default=None, min_length=1, max_length=100)
    region: str | None = Field(default=None, pattern=REGION_PATTERN)
    postal_code: str | None = Field(default=None, max_length=20)


class IdentityResponse(BaseModel):
    """Response schema for account data. Never includes the credential."""

    id: UUID
    email: str
    name: str
    city: str
    region: str
    postal_code: str | None
    role: str | None
    avatar_path: str | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_view(cls, view: IdentityView) -> "IdentityResponse":
        return cls.model_validate(view)


class RegistrationResponse(BaseModel):
    """Registration outcome.

    ``partial`` is true when the account exists but its role profile
    could not be stored.
    """

    user: IdentityResponse
    partial: bool = False


class AuthResponse(BaseModel):
    """Login response with the sanitized account and its access token."""

    user: IdentityResponse
    access_token: str
    token_type: str = Field(default="bearer")
    expires_in: int


class DonorProfileResponse(BaseModel):
    role: Literal["DONOR"] = "DONOR"
    id: UUID
    owner_id: UUID
    tax_id: str
    blood_type: str
    birth_date: date


class CompanyProfileResponse(BaseModel):
    role: Literal["COMPANY"] = "COMPANY"
    id: UUID
    owner_id: UUID
    tax_id: str
    institution_name: str
    facility_code: str


def profile_response(
    profile: DonorProfile | CompanyProfile,
) -> DonorProfileResponse | CompanyProfileResponse:
    if isinstance(profile, DonorProfile):
        return DonorProfileResponse(
            id=profile.id,
            owner_id=profile.owner_id,
            tax_id=profile.tax_id,
            blood_type=profile.blood_type.value,
            birth_date=profile.birth_date,
        )
    return CompanyProfileResponse(
        id=profile.id,
        owner_id=profile.owner_id,
        tax_id=profile.tax_id,
        institution_name=profile.institution_name,
        facility_code=profile.facility_code,
    )
