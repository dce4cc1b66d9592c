"""Pydantic schemas for API request/response models."""

from donare.presentation.api.schemas.users import (
    AuthResponse,
    ChangePasswordRequest,
    CompanyProfileRequest,
    CompanyProfileResponse,
    DonorProfileRequest,
    DonorProfileResponse,
    IdentityResponse,
    LoginRequest,
    RegisterUserRequest,
    RegistrationResponse,
    UpdateUserRequest,
    profile_response,
)

__all__ = [
    "AuthResponse",
    "ChangePasswordRequest",
    "CompanyProfileRequest",
    "CompanyProfileResponse",
    "DonorProfileRequest",
    "DonorProfileResponse",
    "IdentityResponse",
    "LoginRequest",
    "RegisterUserRequest",
    "RegistrationResponse",
    "UpdateUserRequest",
    "profile_response",
]
