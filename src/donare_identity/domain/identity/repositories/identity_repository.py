"""Identity repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from donare_identity.domain.identity.aggregates.identity import Identity
from donare_identity.domain.identity.value_objects.email import Email


class IdentityRepository(ABC):
    """Repository interface for Identity aggregates."""

    @abstractmethod
    async def create(self, identity: Identity) -> Identity:
        """Persist a new identity.

        Raises EmailAlreadyExistsError when the email is already taken.
        """

    @abstractmethod
    async def find_by_id(self, identity_id: UUID) -> Optional[Identity]:
        """Find an identity by its ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[Identity]:
        """Find an identity by its email address."""

    @abstractmethod
    async def replace_credential(
        self,
        identity_id: UUID,
        credential_hash: str,
    ) -> Optional[Identity]:
        """Store a new credential hash; None if the identity does not exist."""

    @abstractmethod
    async def replace_avatar(
        self,
        identity_id: UUID,
        avatar_path: str,
    ) -> Optional[Identity]:
        """Store a new avatar path; None if the identity does not exist."""

    @abstractmethod
    async def update(
        self,
        identity_id: UUID,
        name: str | None = None,
        city: str | None = None,
        region: str | None = None,
        postal_code: str | None = None,
    ) -> Optional[Identity]:
        """Update contact fields; None if the identity does not exist."""
