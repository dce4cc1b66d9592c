"""Password hashing service using scrypt.

Stored credentials have the form ``<salt>:<derived key>``, both hex-encoded.
"""

import secrets

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt


class PasswordHashingService:
    """Service for salted password hashing and verification.

    Uses the scrypt key derivation function with a fresh random salt per
    hash. Verification re-derives the key and compares it in constant time.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> record = service.hash("Abc12345!")
    >>> service.verify("Abc12345!", record)
    True
    >>> service.verify("wrong", record)
    False
    """

    SALT_BYTES = 16
    KEY_LENGTH = 64
    SEPARATOR = ":"

    def __init__(self, cost: int = 2**14, block_size: int = 8, parallelism: int = 1):
        """Initialize the password hashing service.

        Parameters
        ----------
        cost
            The scrypt CPU/memory cost parameter (N). Must be a power of two.
        block_size
            The scrypt block size parameter (r).
        parallelism
            The scrypt parallelization parameter (p).
        """
        self._cost = cost
        self._block_size = block_size
        self._parallelism = parallelism

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        No strength rules are applied here; an empty password hashes fine.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The credential record as ``salt:hash`` in hex
        """
        salt = secrets.token_hex(self.SALT_BYTES)
        derived = self._kdf(salt).derive(password.encode("utf-8"))
        return f"{salt}{self.SEPARATOR}{derived.hex()}"

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a stored credential record.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The ``salt:hash`` record to verify against

        Returns
        -------
        True if password matches, False otherwise (including for any
        malformed record)
        """
        salt, _, expected_hex = (password_hash or "").partition(self.SEPARATOR)
        if not salt or not expected_hex:
            return False

        try:
            expected = bytes.fromhex(expected_hex)
        except ValueError:
            return False

        if len(expected) != self.KEY_LENGTH:
            return False

        try:
            self._kdf(salt).verify(password.encode("utf-8"), expected)
        except (InvalidKey, ValueError, TypeError):
            return False
        return True

    def _kdf(self, salt: str) -> Scrypt:
        # The hex salt string itself is the KDF salt input
        return Scrypt(
            salt=salt.encode("utf-8"),
            length=self.KEY_LENGTH,
            n=self._cost,
            r=self._block_size,
            p=self._parallelism,
        )
