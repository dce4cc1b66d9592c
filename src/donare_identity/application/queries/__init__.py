"""Identity queries (read operations)."""

from donare_identity.application.queries.get_identity_profile_query import (
    GetIdentityProfileQuery,
    RoleProfile,
)
from donare_identity.application.queries.get_identity_query import GetIdentityQuery

__all__ = [
    "GetIdentityProfileQuery",
    "GetIdentityQuery",
    "RoleProfile",
]
