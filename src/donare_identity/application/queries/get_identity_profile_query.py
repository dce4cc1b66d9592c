"""Fetch the role profile that belongs to an identity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union
from uuid import UUID

from donare_identity.application.results import ErrorReason, Result
from donare_identity.domain.identity import IdentityRole
from donare_identity.domain.profiles import CompanyProfile, DonorProfile

if TYPE_CHECKING:
    from donare_identity.domain.identity import IdentityRepository
    from donare_identity.domain.profiles import (
        CompanyProfileRepository,
        DonorProfileRepository,
    )

RoleProfile = Union[DonorProfile, CompanyProfile]


class GetIdentityProfileQuery:
    """Resolve the identity's role and load the matching profile.

    NOT_FOUND covers a missing identity, an identity without a role, and
    a partial registration whose profile was never stored.
    """

    def __init__(
        self,
        identity_repository: IdentityRepository,
        donor_profile_repository: DonorProfileRepository,
        company_profile_repository: CompanyProfileRepository,
    ):
        self._identity_repo = identity_repository
        self._donor_repo = donor_profile_repository
        self._company_repo = company_profile_repository

    async def execute(self, identity_id: UUID) -> Result[RoleProfile]:
        identity = await self._identity_repo.find_by_id(identity_id)
        if identity is None or identity.role is None:
            return Result.failure(ErrorReason.NOT_FOUND)

        profile: RoleProfile | None
        if identity.role == IdentityRole.DONOR:
            profile = await self._donor_repo.find_by_owner_id(identity_id)
        else:
            profile = await self._company_repo.find_by_owner_id(identity_id)

        if profile is None:
            return Result.failure(ErrorReason.NOT_FOUND)
        return Result.success(profile)
