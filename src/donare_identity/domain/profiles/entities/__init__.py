from donare_identity.domain.profiles.entities.company_profile import CompanyProfile
from donare_identity.domain.profiles.entities.donor_profile import DonorProfile

__all__ = [
    "CompanyProfile",
    "DonorProfile",
]
