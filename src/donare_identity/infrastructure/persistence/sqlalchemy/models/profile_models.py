"""SQLAlchemy models for donor and company profiles.

Each profile row belongs to exactly one identity and is removed with it.
"""

from datetime import date
from uuid import UUID

from sqlalchemy import Date, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from donare_identity.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class DonorProfileModel(Base, TimestampMixin):
    __tablename__ = "donor_profiles"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    owner_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("identities.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    tax_id: Mapped[str] = mapped_column(String(14), unique=True, nullable=False)
    blood_type: Mapped[str] = mapped_column(String(4), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)

    def __repr__(self) -> str:
        return f"<DonorProfileModel(id={self.id}, owner_id={self.owner_id})>"


class CompanyProfileModel(Base, TimestampMixin):
    __tablename__ = "company_profiles"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    owner_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("identities.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    tax_id: Mapped[str] = mapped_column(String(18), unique=True, nullable=False)
    institution_name: Mapped[str] = mapped_column(String(100), nullable=False)
    facility_code: Mapped[str] = mapped_column(String(15), nullable=False)

    def __repr__(self) -> str:
        return f"<CompanyProfileModel(id={self.id}, owner_id={self.owner_id})>"
