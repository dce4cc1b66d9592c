"""Identity domain: the account record shared by donors and companies.

This domain handles:
- Identity aggregate (email, credential hash, contact data, role, avatar)
- Value objects for email, region and role
- The persistence contract for identities
"""

from donare_identity.domain.identity.aggregates import Identity
from donare_identity.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    IdentityNotFoundError,
    InvalidEmailError,
    InvalidRegionError,
)
from donare_identity.domain.identity.repositories import IdentityRepository
from donare_identity.domain.identity.value_objects import (
    Email,
    IdentityRole,
    Region,
)

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "Identity",
    "IdentityNotFoundError",
    "IdentityRepository",
    "IdentityRole",
    "InvalidEmailError",
    "InvalidRegionError",
    "Region",
]
