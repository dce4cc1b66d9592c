"""Identity use cases: registration, login, and account maintenance."""

from donare_identity.application.commands import (
    ChangePasswordCommand,
    UpdateAvatarCommand,
    UpdateIdentityDataCommand,
)
from donare_identity.application.dtos import (
    AuthenticatedIdentity,
    CompanyProfileData,
    DonorProfileData,
    IdentityView,
    RegistrationRequest,
)
from donare_identity.application.queries import (
    GetIdentityProfileQuery,
    GetIdentityQuery,
)
from donare_identity.application.results import ErrorReason, Result
from donare_identity.application.services import (
    AuthenticationService,
    RegistrationService,
)

__all__ = [
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
