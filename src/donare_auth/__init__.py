"""Donare Auth - authentication infrastructure.

This package is independent of the identity domain. It handles:
- Password hashing (scrypt, ``salt:hash`` records)
- JWT token creation and verification

Architecture:
    donare_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from donare_auth import PasswordHashingService, JWTService
"""

from donare_auth.exceptions import (
    AuthError,
    InvalidSignatureError,
    InvalidTokenError,
    MalformedTokenError,
    TokenExpiredError,
)
from donare_auth.schemas import TokenPayload
from donare_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "TokenExpiredError",
    "MalformedTokenError",
    "InvalidSignatureError",
]
