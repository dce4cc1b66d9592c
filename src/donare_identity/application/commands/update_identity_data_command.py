"""Update the contact fields of an identity."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from donare_identity.application.dtos import IdentityView
from donare_identity.application.results import ErrorReason, Result

if TYPE_CHECKING:
    from donare_identity.domain.identity import IdentityRepository

logger = logging.getLogger(__name__)


class UpdateIdentityDataCommand:
    """Change name, city, region or postal code.

    Email, role and credential are not editable through this command.
    """

    def __init__(self, identity_repository: IdentityRepository):
        self._identity_repo = identity_repository

    async def execute(
        self,
        identity_id: UUID,
        name: str | None = None,
        city: str | None = None,
        region: str | None = None,
        postal_code: str | None = None,
    ) -> Result[IdentityView]:
        updated = await self._identity_repo.update(
            identity_id,
            name=name,
            city=city,
            region=region,
            postal_code=postal_code,
        )
        if updated is None:
            return Result.failure(ErrorReason.NOT_FOUND)

        logger.debug("Updated data for identity: %s", identity_id)
        return Result.success(IdentityView.from_identity(updated))
