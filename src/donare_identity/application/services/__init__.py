"""Identity application services."""

from donare_identity.application.services.authentication_service import (
    AuthenticationService,
)
from donare_identity.application.services.registration_service import (
    RegistrationService,
)

__all__ = [
    "AuthenticationService",
    "RegistrationService",
]
