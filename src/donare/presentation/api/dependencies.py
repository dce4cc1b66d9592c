"""FastAPI dependency injection for the Donare API.

Provides dependencies for:
- Database sessions
- Authentication (current identity from JWT)
- Use case instances wired to SQLAlchemy repositories
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from donare.presentation.api.config import get_api_settings
from donare_auth import InvalidTokenError, JWTService, PasswordHashingService, TokenPayload
from donare_config.settings import Settings, get_settings
from donare_identity.application import (
    AuthenticationService,
    ChangePasswordCommand,
    GetIdentityProfileQuery,
    GetIdentityQuery,
    RegistrationService,
    UpdateAvatarCommand,
    UpdateIdentityDataCommand,
)
from donare_identity.application.ports import AvatarStorage
from donare_identity.infrastructure.persistence.sqlalchemy import (
    Base,
    CompanyProfileRepositorySQLAlchemy,
    DonorProfileRepositorySQLAlchemy,
    IdentityRepositorySQLAlchemy,
)
from donare_identity.infrastructure.storage import LocalAvatarStorage

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_settings().database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker (singleton)."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables() -> None:
    """
    Create all database tables (idempotent).

    Existing tables and their data are never modified or deleted.
    """
    engine = get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date")


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service() -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService()


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]
PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]


# -----------------------------------------------------------------------------
# Use Cases
# -----------------------------------------------------------------------------


def get_registration_service(
    session: DBSession,
    password_service: PasswordServiceDep,
) -> RegistrationService:
    return RegistrationService(
        identity_repository=IdentityRepositorySQLAlchemy(session),
        donor_profile_repository=DonorProfileRepositorySQLAlchemy(session),
        company_profile_repository=CompanyProfileRepositorySQLAlchemy(session),
        password_service=password_service,
    )


def get_authentication_service(
    session: DBSession,
    password_service: PasswordServiceDep,
    jwt_service: JWTServiceDep,
) -> AuthenticationService:
    return AuthenticationService(
        identity_repository=IdentityRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


def get_change_password_command(
    session: DBSession,
    password_service: PasswordServiceDep,
) -> ChangePasswordCommand:
    return ChangePasswordCommand(
        identity_repository=IdentityRepositorySQLAlchemy(session),
        password_service=password_service,
    )


def get_update_avatar_command(session: DBSession) -> UpdateAvatarCommand:
    return UpdateAvatarCommand(IdentityRepositorySQLAlchemy(session))


def get_update_identity_data_command(session: DBSession) -> UpdateIdentityDataCommand:
    return UpdateIdentityDataCommand(IdentityRepositorySQLAlchemy(session))


def get_identity_query(session: DBSession) -> GetIdentityQuery:
    return GetIdentityQuery(IdentityRepositorySQLAlchemy(session))


def get_identity_profile_query(session: DBSession) -> GetIdentityProfileQuery:
    return GetIdentityProfileQuery(
        identity_repository=IdentityRepositorySQLAlchemy(session),
        donor_profile_repository=DonorProfileRepositorySQLAlchemy(session),
        company_profile_repository=CompanyProfileRepositorySQLAlchemy(session),
    )


def get_avatar_storage(settings: SettingsDep) -> AvatarStorage:
    return LocalAvatarStorage(
        upload_dir=settings.avatar_upload_dir,
        max_bytes=settings.avatar_max_bytes,
    )


RegistrationServiceDep = Annotated[
    RegistrationService,
    Depends(get_registration_service),
]
AuthServiceDep = Annotated[AuthenticationService, Depends(get_authentication_service)]
ChangePasswordDep = Annotated[
    ChangePasswordCommand,
    Depends(get_change_password_command),
]
UpdateAvatarDep = Annotated[UpdateAvatarCommand, Depends(get_update_avatar_command)]
UpdateIdentityDataDep = Annotated[
    UpdateIdentityDataCommand,
    Depends(get_update_identity_data_command),
]
IdentityQueryDep = Annotated[GetIdentityQuery, Depends(get_identity_query)]
IdentityProfileQueryDep = Annotated[
    GetIdentityProfileQuery,
    Depends(get_identity_profile_query),
]
AvatarStorageDep = Annotated[AvatarStorage, Depends(get_avatar_storage)]


# -----------------------------------------------------------------------------
# Current Identity (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_identity(
    jwt_service: JWTServiceDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> TokenPayload:
    """
    FastAPI dependency returning the verified token claims.

    Parameters
    ----------
    jwt_service
        JWT service for token verification
    credentials
        Bearer token from Authorization header

    Returns
    -------
    The decoded token payload

    Raises
    ------
    HTTPException
        401 if the token is missing, expired, malformed or badly signed.
        The detail names which of these applied.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Rejected token: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


# Type alias for injected current identity
CurrentIdentity = Annotated[TokenPayload, Depends(get_current_identity)]
