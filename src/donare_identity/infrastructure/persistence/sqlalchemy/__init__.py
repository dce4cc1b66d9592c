"""SQLAlchemy implementation for donare_identity persistence.

Provides:
- Base: Declarative base shared by all models
- IdentityModel, DonorProfileModel, CompanyProfileModel
- IdentityRepositorySQLAlchemy, DonorProfileRepositorySQLAlchemy,
  CompanyProfileRepositorySQLAlchemy
"""

from donare_identity.infrastructure.persistence.sqlalchemy.models import (
    Base,
    CompanyProfileModel,
    DonorProfileModel,
    IdentityModel,
)
from donare_identity.infrastructure.persistence.sqlalchemy.repositories import (
    CompanyProfileRepositorySQLAlchemy,
    DonorProfileRepositorySQLAlchemy,
    IdentityRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "CompanyProfileModel",
    "CompanyProfileRepositorySQLAlchemy",
    "DonorProfileModel",
    "DonorProfileRepositorySQLAlchemy",
    "IdentityModel",
    "IdentityRepositorySQLAlchemy",
]
