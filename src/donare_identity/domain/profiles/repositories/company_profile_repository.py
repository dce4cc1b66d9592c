"""Company profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from donare_identity.domain.profiles.entities import CompanyProfile


class CompanyProfileRepository(ABC):
    """Repository interface for CompanyProfile entities."""

    @abstractmethod
    async def create(self, profile: CompanyProfile) -> CompanyProfile:
        """Persist a new company profile."""

    @abstractmethod
    async def find_by_id(self, profile_id: UUID) -> Optional[CompanyProfile]:
        """Find a company profile by its ID."""

    @abstractmethod
    async def find_by_owner_id(self, owner_id: UUID) -> Optional[CompanyProfile]:
        """Find the company profile belonging to an identity."""

    @abstractmethod
    async def update(self, profile: CompanyProfile) -> Optional[CompanyProfile]:
        """Write back a modified profile; None if it no longer exists."""

    @abstractmethod
    async def delete(self, profile_id: UUID) -> bool:
        """Delete a company profile. Returns whether a row was removed."""
