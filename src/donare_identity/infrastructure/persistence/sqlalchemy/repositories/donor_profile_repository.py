"""SQLAlchemy implementation of DonorProfileRepository."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from donare_identity.domain.identity import IdentityNotFoundError
from donare_identity.domain.profiles import (
    DonorProfile,
    DonorProfileRepository,
    ProfileAlreadyExistsError,
)
from donare_identity.infrastructure.persistence.sqlalchemy.models import (
    DonorProfileModel,
)

logger = logging.getLogger(__name__)


class DonorProfileRepositorySQLAlchemy(DonorProfileRepository):
    """SQLAlchemy implementation of the DonorProfileRepository interface.

    Inserts run inside a SAVEPOINT so a rejected profile leaves the
    identity written earlier in the same session intact.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, profile: DonorProfile) -> DonorProfile:
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

        logger.info("Created donor profile for identity: %s", profile.owner_id)
        return profile

    async def find_by_id(self, profile_id: UUID) -> DonorProfile | None:
        stmt = select(DonorProfileModel).where(DonorProfileModel.id == profile_id)
        return await self._find_one(stmt)

    async def find_by_owner_id(self, owner_id: UUID) -> DonorProfile | None:
        stmt = select(DonorProfileModel).where(DonorProfileModel.owner_id == owner_id)
        return await self._find_one(stmt)

    async def update(self, profile: DonorProfile) -> DonorProfile | None:
        model = await self._session.get(DonorProfileModel, profile.id)
        if model is None:
            return None

        model.tax_id = profile.tax_id
        model.blood_type = profile.blood_type.value
        model.birth_date = profile.birth_date
        model.updated_at = profile.updated_at
        await self._session.flush()

        logger.debug("Updated donor profile: %s", profile.id)
        return profile

    async def delete(self, profile_id: UUID) -> bool:
        model = await self._session.get(DonorProfileModel, profile_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted donor profile: %s", profile_id)
        return True

    async def _find_one(self, stmt) -> DonorProfile | None:
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._map_to_domain(model)

    def _map_to_domain(self, model: DonorProfileModel) -> DonorProfile:
        return DonorProfile(
            id=model.id,
            owner_id=model.owner_id,
            tax_id=model.tax_id,
            blood_type=model.blood_type,
            birth_date=model.birth_date,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, profile: DonorProfile) -> DonorProfileModel:
        return DonorProfileModel(
            id=profile.id,
            owner_id=profile.owner_id,
            tax_id=profile.tax_id,
            blood_type=profile.blood_type.value,
            birth_date=profile.birth_date,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )
