"""SQLAlchemy implementation of CompanyProfileRepository."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from donare_identity.domain.identity import IdentityNotFoundError
from donare_identity.domain.profiles import (
    CompanyProfile,
    CompanyProfileRepository,
    ProfileAlreadyExistsError,
)
from donare_identity.infrastructure.persistence.sqlalchemy.models import (
    CompanyProfileModel,
)

logger = logging.getLogger(__name__)


class CompanyProfileRepositorySQLAlchemy(CompanyProfileRepository):
    """SQLAlchemy implementation of the CompanyProfileRepository interface.

    The CNPJ column is unique: a second company with the same tax id is
    rejected with ProfileAlreadyExistsError.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, profile: CompanyProfile) -> CompanyProfile:
        model = self._map_to_model(profile)
        try:
            async with self._session.begin_nested():
                self._session.add(model)
        except IntegrityError as e:
            if "foreign key" in str(e).lower():
                raise IdentityNotFoundError(profile.owner_id) from e
            if "unique" in str(e).lower():
                raise ProfileAlreadyExistsError(profile.owner_id) from e
            raise

        logger.info("Created company profile for identity: %s", profile.owner_id)
        return profile

    async def find_by_id(self, profile_id: UUID) -> CompanyProfile | None:
        model = await self._session.get(CompanyProfileModel, profile_id)
        return self._map_to_domain(model) if model else None

    async def find_by_owner_id(self, owner_id: UUID) -> CompanyProfile | None:
        stmt = select(CompanyProfileModel).where(
            CompanyProfileModel.owner_id == owner_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def update(self, profile: CompanyProfile) -> CompanyProfile | None:
        model = await self._session.get(CompanyProfileModel, profile.id)
        if model is None:
            return None

        model.tax_id = profile.tax_id
        model.institution_name = profile.institution_name
        model.facility_code = profile.facility_code
        model.updated_at = profile.updated_at
        await self._session.flush()

        logger.debug("Updated company profile: %s", profile.id)
        return profile

    async def delete(self, profile_id: UUID) -> bool:
        model = await self._session.get(CompanyProfileModel, profile_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted company profile: %s", profile_id)
        return True

    def _map_to_domain(self, model: CompanyProfileModel) -> CompanyProfile:
        return CompanyProfile(
            id=model.id,
            owner_id=model.owner_id,
            tax_id=model.tax_id,
            institution_name=model.institution_name,
            facility_code=model.facility_code,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, profile: CompanyProfile) -> CompanyProfileModel:
        return CompanyProfileModel(
            id=profile.id,
            owner_id=profile.owner_id,
            tax_id=profile.tax_id,
            institution_name=profile.institution_name,
            facility_code=profile.facility_code,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )
