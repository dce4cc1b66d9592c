"""SQLAlchemy implementation of IdentityRepository."""

import logging
from typing import Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from donare_identity.domain.identity import (
    Email,
    EmailAlreadyExistsError,
    Identity,
    IdentityRepository,
)
from donare_identity.infrastructure.persistence.sqlalchemy.models import IdentityModel

logger = logging.getLogger(__name__)


class IdentityRepositorySQLAlchemy(IdentityRepository):
    """SQLAlchemy implementation of the IdentityRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, identity: Identity) -> Identity:
        if await self._find_model_by_email(identity.email) is not None:
            raise EmailAlreadyExistsError(identity.email)

        model = self._map_to_model(identity)
        try:
            # Savepoint keeps the outer transaction usable after a unique violation
            async with self._session.begin_nested():
                self._session.add(model)
        except IntegrityError as e:
            if "unique" in str(e).lower():
                raise EmailAlreadyExistsError(identity.email) from e
            raise

        logger.info("Created identity: %s (email: %s)", identity.id, identity.email)
        return self._map_to_domain(model)

    async def find_by_id(self, identity_id: UUID) -> Identity | None:
        model = await self._find_model_by_id(identity_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> Identity | None:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        model = await self._find_model_by_email(email_value)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def replace_credential(
        self,
        identity_id: UUID,
        credential_hash: str,
    ) -> Identity | None:
        model = await self._find_model_by_id(identity_id)
        if model is None:
            return None

        identity = self._map_to_domain(model)
        identity.replace_credential(credential_hash)
        return await self._write_back(model, identity)

    async def replace_avatar(
        self,
        identity_id: UUID,
        avatar_path: str,
    ) -> Identity | None:
        model = await self._find_model_by_id(identity_id)
        if model is None:
            return None

        identity = self._map_to_domain(model)
        identity.replace_avatar(avatar_path)
        return await self._write_back(model, identity)

    async def update(
        self,
        identity_id: UUID,
        name: str | None = None,
        city: str | None = None,
        region: str | None = None,
        postal_code: str | None = None,
    ) -> Identity | None:
        model = await self._find_model_by_id(identity_id)
        if model is None:
            return None

        identity = self._map_to_domain(model)
        identity.update_details(
            name=name,
            city=city,
            region=region,
            postal_code=postal_code,
        )
        return await self._write_back(model, identity)

    async def _write_back(self, model: IdentityModel, identity: Identity) -> Identity:
        self._update_model(model, identity)
        await self._session.flush()
        logger.debug("Updated identity: %s", identity.id)
        return identity

    async def _find_model_by_id(self, identity_id: UUID) -> IdentityModel | None:
        stmt = select(IdentityModel).where(IdentityModel.id == identity_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _find_model_by_email(self, email: str) -> IdentityModel | None:
        stmt = select(IdentityModel).where(IdentityModel.email == email)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: IdentityModel) -> Identity:
        return Identity.reconstitute(
            id=model.id,
            email=model.email,
            credential_hash=model.password_hash,
            name=model.name,
            city=model.city,
            region=model.region,
            postal_code=model.postal_code,
            role=model.role,
            avatar_path=model.avatar_path,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, identity: Identity) -> IdentityModel:
        return IdentityModel(
            id=identity.id,
            email=identity.email,
            password_hash=identity.credential_hash,
            name=identity.name,
            city=identity.city,
            region=identity.region,
            postal_code=identity.postal_code,
            role=identity.role.value if identity.role else None,
            avatar_path=identity.avatar_path,
            created_at=identity.created_at,
            updated_at=identity.updated_at,
        )

    def _update_model(self, model: IdentityModel, identity: Identity) -> None:
        model.password_hash = identity.credential_hash
        model.name = identity.name
        model.city = identity.city
        model.region = identity.region
        model.postal_code = identity.postal_code
        model.avatar_path = identity.avatar_path
        model.updated_at = identity.updated_at
