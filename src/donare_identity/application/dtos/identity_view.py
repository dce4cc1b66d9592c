"""Outward projections of an Identity.

These never carry the credential hash.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from donare_identity.domain.identity import Identity


@dataclass(frozen=True)
class IdentityView:
    """Read-only identity data safe to hand to any caller."""

    id: UUID
    email: str
    name: str
    city: str
    region: str
    postal_code: str | None
    role: str | None
    avatar_path: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_identity(cls, identity: Identity) -> IdentityView:
        return cls(
            id=identity.id,
            email=identity.email,
            name=identity.name,
            city=identity.city,
            region=identity.region,
            postal_code=identity.postal_code,
            role=identity.role.value if identity.role else None,
            avatar_path=identity.avatar_path,
            created_at=identity.created_at,
            updated_at=identity.updated_at,
        )


@dataclass(frozen=True)
class AuthenticatedIdentity:
    """Result of a successful login."""

    identity: IdentityView
    access_token: str
    expires_in: int
    token_type: str = "bearer"
