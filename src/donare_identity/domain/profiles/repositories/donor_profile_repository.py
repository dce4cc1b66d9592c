"""Donor profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from donare_identity.domain.profiles.entities import DonorProfile


class DonorProfileRepository(ABC):
    """Repository interface for DonorProfile entities."""

    @abstractmethod
    async def create(self, profile: DonorProfile) -> DonorProfile:
        """Persist a new donor profile."""

    @abstractmethod
    async def find_by_id(self, profile_id: UUID) -> Optional[DonorProfile]:
        """Find a donor profile by its ID."""

    @abstractmethod
    async def find_by_owner_id(self, owner_id: UUID) -> Optional[DonorProfile]:
        """Find the donor profile belonging to an identity."""

    @abstractmethod
    async def update(self, profile: DonorProfile) -> Optional[DonorProfile]:
        """Write back a modified profile; None if it no longer exists."""

    @abstractmethod
    async def delete(self, profile_id: UUID) -> bool:
        """Delete a donor profile. Returns whether a row was removed."""
