"""Record a new avatar path for an identity."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from donare_identity.application.dtos import IdentityView
from donare_identity.application.results import ErrorReason, Result

if TYPE_CHECKING:
    from donare_identity.domain.identity import IdentityRepository

logger = logging.getLogger(__name__)


class UpdateAvatarCommand:
    """Store the path of an already-saved avatar file on the identity."""

    def __init__(self, identity_repository: IdentityRepository):
        self._identity_repo = identity_repository

    async def execute(self, identity_id: UUID, avatar_path: str) -> Result[IdentityView]:
        identity = await self._identity_repo.find_by_id(identity_id)
        if identity is None:
            return Result.failure(ErrorReason.NOT_FOUND)

        updated = await self._identity_repo.replace_avatar(identity_id, avatar_path)
        if updated is None:
            return Result.failure(ErrorReason.NOT_FOUND)

        logger.info("Avatar updated for identity: %s", identity_id)
        return Result.success(IdentityView.from_identity(updated))
