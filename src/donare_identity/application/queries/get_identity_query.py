"""Look up an identity by id."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from donare_identity.application.dtos import IdentityView
from donare_identity.application.results import ErrorReason, Result

if TYPE_CHECKING:
    from donare_identity.domain.identity import IdentityRepository


class GetIdentityQuery:
    def __init__(self, identity_repository: IdentityRepository):
        self._identity_repo = identity_repository

    async def execute(self, identity_id: UUID) -> Result[IdentityView]:
        identity = await self._identity_repo.find_by_id(identity_id)
        if identity is None:
            return Result.failure(ErrorReason.NOT_FOUND)
        return Result.success(IdentityView.from_identity(identity))
