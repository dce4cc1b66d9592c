from donare_identity.domain.identity.value_objects.email import Email
from donare_identity.domain.identity.value_objects.identity_role import IdentityRole
from donare_identity.domain.identity.value_objects.region import Region

__all__ = [
    "Email",
    "IdentityRole",
    "Region",
]
