"""Authentication exceptions.

These exceptions are raised by the donare_auth package and should be
caught and handled by the presentation layer.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token cannot be accepted."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class TokenExpiredError(InvalidTokenError):
    """Raised when a JWT token is past its expiry."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class MalformedTokenError(InvalidTokenError):
    """Raised when a JWT token cannot be decoded or lacks required claims."""

    def __init__(self, message: str = "Malformed token"):
        super().__init__(message)


class InvalidSignatureError(InvalidTokenError):
    """Raised when a JWT token was not signed with our secret."""

    def __init__(self, message: str = "Invalid token signature"):
        super().__init__(message)
