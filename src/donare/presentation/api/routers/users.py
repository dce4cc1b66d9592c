"""Users router for registration, login and account maintenance."""

import logging
from uuid import UUID

from fastapi import APIRouter, File, HTTPException, Response, UploadFile, status

from donare.presentation.api.dependencies import (
    AuthServiceDep,
    AvatarStorageDep,
    ChangePasswordDep,
    CurrentIdentity,
    DBSession,
    IdentityProfileQueryDep,
    IdentityQueryDep,
    RegistrationServiceDep,
    SettingsDep,
    UpdateAvatarDep,
    UpdateIdentityDataDep,
)
from donare.presentation.api.exception_handlers import failure_to_exception
from donare.presentation.api.schemas.users import (
    AuthResponse,
    ChangePasswordRequest,
    CompanyProfileResponse,
    DonorProfileResponse,
    IdentityResponse,
    LoginRequest,
    RegisterUserRequest,
    RegistrationResponse,
    UpdateUserRequest,
    profile_response,
)
from donare_auth import TokenPayload
from donare_identity.application import (
    CompanyProfileData,
    DonorProfileData,
    ErrorReason,
    RegistrationRequest,
)
from donare_identity.application.dtos import ProfileData
from donare_identity.domain.profiles import ProfileNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


def _ensure_owner(current: TokenPayload, user_id: UUID) -> None:
    """Only the account owner may read or change it."""
    if current.identity_id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not allowed to access another user's account",
        )


def _to_registration_request(request: RegisterUserRequest) -> RegistrationRequest:
    profile: ProfileData | None = None
    if request.profile is not None and request.profile.person_type == "DONOR":
        profile = DonorProfileData(
            tax_id=request.profile.tax_id,
            blood_type=request.profile.blood_type,
            birth_date=request.profile.birth_date,
        )
    elif request.profile is not None:
        profile = CompanyProfileData(
            tax_id=request.profile.tax_id,
            institution_name=request.profile.institution_name,
            facility_code=request.profile.facility_code,
        )

    return RegistrationRequest(
        email=request.email,
        password=request.password,
        name=request.name,
        city=request.city,
        region=request.region,
        postal_code=request.postal_code,
        profile=profile,
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Register a donor or company account",
    responses={
        201: {"description": "Account and profile created"},
        206: {"description": "Account created, profile could not be stored"},
        409: {"description": "Email already registered"},
        422: {"description": "Invalid input or no role given"},
    },
)
async def register(
    request: RegisterUserRequest,
    response: Response,
    registration_service: RegistrationServiceDep,
    session: DBSession,
) -> RegistrationResponse:
    """
    Register a new account.

    The role follows from ``profile.person_type``. When the profile cannot
    be stored the account is still created and the response is 206.
    """
    try:
        result = await registration_service.register(
            _to_registration_request(request),
        )
        if result.error == ErrorReason.ALREADY_EXISTS:
            await session.rollback()
        else:
            # Role-less and partial registrations keep the account
            await session.commit()
    except Exception:
        await session.rollback()
        raise

    if result.is_failure:
        raise failure_to_exception(result.error)

    if result.is_partial:
        response.status_code = status.HTTP_206_PARTIAL_CONTENT

    return RegistrationResponse(
        user=IdentityResponse.from_view(result.value),
        partial=result.is_partial,
    )


@router.post(
    "/authenticate",
    summary="Authenticate with email and password",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Wrong password"},
        404: {"description": "No account for this email"},
    },
)
async def authenticate(
    request: LoginRequest,
    auth_service: AuthServiceDep,
) -> AuthResponse:
    result = await auth_service.authenticate(request.email, request.password)
    if result.is_failure:
        raise failure_to_exception(result.error)

    authenticated = result.value
    return AuthResponse(
        user=IdentityResponse.from_view(authenticated.identity),
        access_token=authenticated.access_token,
        token_type=authenticated.token_type,
        expires_in=authenticated.expires_in,
    )


@router.get(
    "/{user_id}",
    summary="Get account data",
    responses={
        200: {"description": "Account data"},
        401: {"description": "Not authenticated"},
        403: {"description": "Not the account owner"},
        404: {"description": "Account not found"},
    },
)
async def get_user(
    user_id: UUID,
    current: CurrentIdentity,
    query: IdentityQueryDep,
) -> IdentityResponse:
    _ensure_owner(current, user_id)

    result = await query.execute(user_id)
    if result.is_failure:
        raise failure_to_exception(result.error)
    return IdentityResponse.from_view(result.value)


@router.get(
    "/{user_id}/profile",
    summary="Get the donor or company profile",
    responses={
        200: {"description": "Role profile"},
        403: {"description": "Not the account owner"},
        404: {"description": "Account or profile not found"},
    },
)
async def get_profile(
    user_id: UUID,
    current: CurrentIdentity,
    query: IdentityProfileQueryDep,
) -> DonorProfileResponse | CompanyProfileResponse:
    _ensure_owner(current, user_id)

    result = await query.execute(user_id)
    if result.error == ErrorReason.NOT_FOUND:
        raise ProfileNotFoundError(user_id)
    if result.is_failure:
        raise failure_to_exception(result.error)
    return profile_response(result.value)


@router.patch(
    "/{user_id}",
    summary="Update contact data",
    responses={
        200: {"description": "Account updated"},
        403: {"description": "Not the account owner"},
        404: {"description": "Account not found"},
    },
)
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    current: CurrentIdentity,
    command: UpdateIdentityDataDep,
    session: DBSession,
) -> IdentityResponse:
    _ensure_owner(current, user_id)

    try:
        result = await command.execute(
            user_id,
            name=request.name,
            city=request.city,
            region=request.region,
            postal_code=request.postal_code,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    if result.is_failure:
        raise failure_to_exception(result.error)
    return IdentityResponse.from_view(result.value)


@router.put(
    "/{user_id}/password",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Change password",
    responses={
        204: {"description": "Password changed"},
        401: {"description": "Current password is wrong"},
        403: {"description": "Not the account owner"},
        404: {"description": "Account not found"},
    },
)
async def change_password(
    user_id: UUID,
    request: ChangePasswordRequest,
    current: CurrentIdentity,
    command: ChangePasswordDep,
    session: DBSession,
) -> None:
    _ensure_owner(current, user_id)

    try:
        result = await command.execute(
            user_id,
            current_password=request.current_password,
            new_password=request.new_password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    if result.is_failure:
        raise failure_to_exception(result.error)


@router.post(
    "/{user_id}/avatar",
    summary="Upload an avatar image",
    responses={
        200: {"description": "Avatar stored"},
        403: {"description": "Not the account owner"},
        404: {"description": "Account not found"},
        413: {"description": "File larger than the configured limit"},
        415: {"description": "Not a JPEG or PNG image"},
    },
)
async def upload_avatar(
    user_id: UUID,
    current: CurrentIdentity,
    command: UpdateAvatarDep,
    storage: AvatarStorageDep,
    session: DBSession,
    settings: SettingsDep,
    file: UploadFile = File(...),
) -> IdentityResponse:
    _ensure_owner(current, user_id)

    # One byte past the limit is enough to reject the upload
    data = await file.read(settings.avatar_max_bytes + 1)
    avatar_path = await storage.store(file.filename, file.content_type, data)

    try:
        result = await command.execute(user_id, avatar_path)
        await session.commit()
    except Exception:
        await session.rollback()
        await storage.delete(avatar_path)
        raise

    if result.is_failure:
        # Nothing references the file
        await storage.delete(avatar_path)
        raise failure_to_exception(result.error)
    return IdentityResponse.from_view(result.value)
