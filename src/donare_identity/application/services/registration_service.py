"""Registration of donor and company accounts."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from donare_identity.application.dtos import (
    CompanyProfileData,
    DonorProfileData,
    IdentityView,
    RegistrationRequest,
)
from donare_identity.application.results import ErrorReason, Result
from donare_identity.domain.identity import EmailAlreadyExistsError, Identity
from donare_identity.domain.profiles import CompanyProfile, DonorProfile

if TYPE_CHECKING:
    from donare_auth import PasswordHashingService
    from donare_identity.domain.identity import IdentityRepository
    from donare_identity.domain.profiles import (
        CompanyProfileRepository,
        DonorProfileRepository,
    )

logger = logging.getLogger(__name__)


class RegistrationService:
    """
    Application service creating an Identity and its role profile.

    Registration is two steps against two stores and is not atomic:
    - the Identity is created first; an email collision stops everything
    - the donor or company profile is attempted next; if that fails the
      Identity is kept and the result is a partial success

    A request without a role still creates the Identity but is reported
    as a ROLE_MISSING failure.
    """

    def __init__(
        self,
        identity_repository: IdentityRepository,
        donor_profile_repository: DonorProfileRepository,
        company_profile_repository: CompanyProfileRepository,
        password_service: PasswordHashingService,
    ):
        self._identity_repo = identity_repository
        self._donor_repo = donor_profile_repository
        self._company_repo = company_profile_repository
        self._password_service = password_service

    async def register(self, request: RegistrationRequest) -> Result[IdentityView]:
        credential_hash = self._password_service.hash(request.password or "")

        identity = Identity.create(
            email=request.email,
            credential_hash=credential_hash,
            name=request.name,
            city=request.city,
            region=request.region,
            postal_code=request.postal_code,
            role=request.role,
        )

        try:
            identity = await self._identity_repo.create(identity)
        except EmailAlreadyExistsError:
            logger.info("Registration rejected, email in use: %s", identity.email)
            return Result.failure(ErrorReason.ALREADY_EXISTS)

        view = IdentityView.from_identity(identity)

        if request.profile is None:
            # TODO: confirm with product whether a role-less registration
            # should roll back the identity instead of leaving it behind.
            logger.warning(
                "Identity %s registered without a role, no profile created",
                identity.id,
            )
            return Result.failure(ErrorReason.ROLE_MISSING)

        try:
            await self._create_profile(identity, request.profile)
        except Exception as e:
            # Only the type: driver errors echo bound parameters (tax ids)
            logger.warning(
                "Identity %s created but %s profile failed: %s",
                identity.id,
                request.profile.role.value,
                type(e).__name__,
            )
            return Result.partial_success(view)

        logger.info(
            "Identity registered: %s (role: %s)",
            identity.id,
            request.profile.role.value,
        )
        return Result.success(view)

    async def _create_profile(
        self,
        identity: Identity,
        data: DonorProfileData | CompanyProfileData,
    ) -> None:
        if isinstance(data, DonorProfileData):
            await self._donor_repo.create(
                DonorProfile.create(
                    owner_id=identity.id,
                    tax_id=data.tax_id,
                    blood_type=data.blood_type,
                    birth_date=data.birth_date,
                ),
            )
        else:
            await self._company_repo.create(
                CompanyProfile.create(
                    owner_id=identity.id,
                    tax_id=data.tax_id,
                    institution_name=data.institution_name,
                    facility_code=data.facility_code,
                ),
            )
