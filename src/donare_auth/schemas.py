"""Auth schemas and data structures."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    identity_id
        The unique identifier of the identity the token was issued for
    email
        The identity's email address
    role
        The identity's role ("DONOR" or "COMPANY"), None when unassigned
    issued_at
        Token issue timestamp
    expires_at
        Token expiration timestamp
    """

    identity_id: UUID
    email: str
    role: str | None
    issued_at: datetime
    expires_at: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.expires_at.tzinfo) > self.expires_at
