"""SQLAlchemy models for identity management."""

from donare_identity.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from donare_identity.infrastructure.persistence.sqlalchemy.models.identity_model import (
    IdentityModel,
)
from donare_identity.infrastructure.persistence.sqlalchemy.models.profile_models import (
    CompanyProfileModel,
    DonorProfileModel,
)

__all__ = [
    "Base",
    "CompanyProfileModel",
    "DonorProfileModel",
    "IdentityModel",
    "TimestampMixin",
]
