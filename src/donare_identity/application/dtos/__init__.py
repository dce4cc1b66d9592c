from donare_identity.application.dtos.identity_view import (
    AuthenticatedIdentity,
    IdentityView,
)
from donare_identity.application.dtos.registration import (
    CompanyProfileData,
    DonorProfileData,
    ProfileData,
    RegistrationRequest,
)

__all__ = [
    "AuthenticatedIdentity",
    "CompanyProfileData",
    "DonorProfileData",
    "IdentityView",
    "ProfileData",
    "RegistrationRequest",
]
