"""Authentication service for identity login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from donare_identity.application.dtos import AuthenticatedIdentity, IdentityView
from donare_identity.application.results import ErrorReason, Result
from donare_identity.domain.identity import InvalidEmailError

if TYPE_CHECKING:
    from donare_auth import JWTService, PasswordHashingService, TokenPayload
    from donare_identity.domain.identity import IdentityRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for identity authentication.

    Bridges the donare_auth infrastructure (password hashing, JWT tokens)
    with the Identity aggregate. The returned identity is a sanitized
    IdentityView; the stored hash is never part of a result.
    """

    def __init__(
        self,
        identity_repository: IdentityRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._identity_repo = identity_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def authenticate(
        self,
        email: str,
        password: str,
    ) -> Result[AuthenticatedIdentity]:
        try:
            identity = await self._identity_repo.find_by_email(email)
        except InvalidEmailError:
            # No stored identity can carry an address the domain rejects
            identity = None

        if identity is None:
            logger.info("Login failed, unknown email: %s", email)
            return Result.failure(ErrorReason.NOT_FOUND)

        if not self._password_service.verify(password, identity.credential_hash or ""):
            logger.info("Login failed, wrong password for identity: %s", identity.id)
            return Result.failure(ErrorReason.INVALID_CREDENTIAL)

        access_token = self._jwt_service.create_access_token(
            identity_id=identity.id,
            email=identity.email,
            role=identity.role.value if identity.role else None,
        )

        logger.info("Identity logged in: %s", identity.id)
        return Result.success(
            AuthenticatedIdentity(
                identity=IdentityView.from_identity(identity),
                access_token=access_token,
                expires_in=self._jwt_service.access_token_ttl_seconds,
            ),
        )

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)
