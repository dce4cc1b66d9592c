"""Change the password of an identity."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from donare_identity.application.dtos import IdentityView
from donare_identity.application.results import ErrorReason, Result

if TYPE_CHECKING:
    from donare_auth import PasswordHashingService
    from donare_identity.domain.identity import IdentityRepository

logger = logging.getLogger(__name__)


class ChangePasswordCommand:
    """Replace the credential after checking the current password.

    The caller must already be authenticated as ``identity_id``; the
    ownership check happens at the transport boundary.
    """

    def __init__(
        self,
        identity_repository: IdentityRepository,
        password_service: PasswordHashingService,
    ):
        self._identity_repo = identity_repository
        self._password_service = password_service

    async def execute(
        self,
        identity_id: UUID,
        current_password: str,
        new_password: str,
    ) -> Result[IdentityView]:
        identity = await self._identity_repo.find_by_id(identity_id)
        if identity is None:
            return Result.failure(ErrorReason.NOT_FOUND)

        if not self._password_service.verify(
            current_password,
            identity.credential_hash or "",
        ):
            logger.info("Password change rejected for identity: %s", identity_id)
            return Result.failure(ErrorReason.INVALID_CREDENTIAL)

        new_hash = self._password_service.hash(new_password)
        updated = await self._identity_repo.replace_credential(identity_id, new_hash)
        if updated is None:
            return Result.failure(ErrorReason.NOT_FOUND)

        logger.info("Password changed for identity: %s", identity_id)
        return Result.success(IdentityView.from_identity(updated))
