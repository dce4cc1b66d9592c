# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations for identity management."""

from donare_identity.infrastructure.persistence.sqlalchemy.repositories.company_profile_repository import (
    CompanyProfileRepositorySQLAlchemy,
)
from donare_identity.infrastructure.persistence.sqlalchemy.repositories.donor_profile_repository import (
    DonorProfileRepositorySQLAlchemy,
)
from donare_identity.infrastructure.persistence.sqlalchemy.repositories.identity_repository import (
    IdentityRepositorySQLAlchemy,
)

__all__ = [
    "CompanyProfileRepositorySQLAlchemy",
    "DonorProfileRepositorySQLAlchemy",
    "IdentityRepositorySQLAlchemy",
]
