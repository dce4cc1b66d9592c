from donare_identity.domain.profiles.repositories.company_profile_repository import (
    CompanyProfileRepository,
)
from donare_identity.domain.profiles.repositories.donor_profile_repository import (
    DonorProfileRepository,
)

__all__ = [
    "CompanyProfileRepository",
    "DonorProfileRepository",
]
