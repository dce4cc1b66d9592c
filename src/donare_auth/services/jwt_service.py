"""JWT token service.

Provides JWT token creation and verification for authentication.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from donare_auth.exceptions import (
    InvalidSignatureError,
    InvalidTokenError,
    MalformedTokenError,
    TokenExpiredError,
)
from donare_auth.schemas import TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    The signing secret is injected at construction; the service never
    reads it from the process environment.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(identity_id, "d@x.com", "DONOR")
    >>> payload = service.verify_token(token)
    >>> print(payload.identity_id)
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 1
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_hours
            Hours until an access token expires (default 1)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(hours=access_token_expire_hours)

    @property
    def access_token_ttl_seconds(self) -> int:
        return int(self._access_expire.total_seconds())

    def create_access_token(
        self,
        identity_id: UUID,
        email: str,
        role: str | None,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create an access token bound to an identity.

        Parameters
        ----------
        identity_id
            The identity's unique identifier
        email
            The identity's email address
        role
            The identity's role value, or None
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta or self._access_expire)

        payload = {
            "sub": str(identity_id),
            "email": email,
            "role": role,
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        TokenExpiredError
            If the token is past its expiry
        InvalidSignatureError
            If the signature does not match our secret
        MalformedTokenError
            If the token cannot be decoded or lacks required claims
        InvalidTokenError
            For any other rejection by the JWT library
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "exp", "iat"]},
            )

            return TokenPayload(
                identity_id=UUID(payload["sub"]),
                email=payload["email"],
                role=payload.get("role"),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError from e
        except jwt.InvalidSignatureError as e:
            raise InvalidSignatureError from e
        except (jwt.DecodeError, jwt.MissingRequiredClaimError) as e:
            raise MalformedTokenError(f"Malformed token: {e}") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise MalformedTokenError(f"Malformed token payload: {e}") from e
