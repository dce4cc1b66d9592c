"""Donare Identity - accounts for donors and health facilities.

This module handles all identity-related concerns:
- Identity management (registration, contact data, avatar)
- Donor and company role profiles
- Authentication against stored scrypt credentials
- Password change

Hashing and token signing come from donare_auth; persistence lives in
donare_identity.infrastructure.
"""

from donare_identity.application import (
    AuthenticatedIdentity,
    AuthenticationService,
    ChangePasswordCommand,
    CompanyProfileData,
    DonorProfileData,
    ErrorReason,
    GetIdentityProfileQuery,
    GetIdentityQuery,
    IdentityView,
    RegistrationRequest,
    RegistrationService,
    Result,
    UpdateAvatarCommand,
    UpdateIdentityDataCommand,
)
from donare_identity.domain.identity import (
    Email,
    EmailAlreadyExistsError,
    Identity,
    IdentityNotFoundError,
    IdentityRepository,
    IdentityRole,
    InvalidEmailError,
)
from donare_identity.domain.profiles import (
    BloodType,
    CompanyProfile,
    CompanyProfileRepository,
    DonorProfile,
    DonorProfileRepository,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
)

__all__ = [
    # Domain - Identity
    "Email",
    "EmailAlreadyExistsError",
    "Identity",
    "IdentityNotFoundError",
    "IdentityRepository",
    "IdentityRole",
    "InvalidEmailError",
    # Domain - Profiles
    "BloodType",
    "CompanyProfile",
    "CompanyProfileRepository",
    "DonorProfile",
    "DonorProfileRepository",
    "ProfileAlreadyExistsError",
    "ProfileNotFoundError",
    # Application
    "AuthenticatedIdentity",
    "AuthenticationService",
    "ChangePasswordCommand",
    "CompanyProfileData",
    "DonorProfileData",
    "ErrorReason",
    "GetIdentityProfileQuery",
    "GetIdentityQuery",
    "IdentityView",
    "RegistrationRequest",
    "RegistrationService",
    "Result",
    "UpdateAvatarCommand",
    "UpdateIdentityDataCommand",
]
