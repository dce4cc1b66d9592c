"""Identity aggregate: one account, with its credential and contact data."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from donare_identity.domain.identity.value_objects import Email, IdentityRole, Region
from donare_identity.domain.shared.time import utc_now


class Identity:
    """
    Identity aggregate root.

    Owns the credential hash and the avatar path. Role-specific data lives
    in the donor/company profiles, which reference the identity by id.
    The credential hash is never part of any outward projection.
    """

    def __init__(  # noqa: PLR0913
        self,
        email: Union[str, Email],
        credential_hash: str,
        name: str,
        city: str,
        region: Union[str, Region],
        postal_code: str | None = None,
        role: Union[str, IdentityRole, None] = None,
        avatar_path: str | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._email = email if isinstance(email, Email) else Email(email)
        self._credential_hash = credential_hash
        self._name = name
        self._city = city
        self._region = region if isinstance(region, Region) else Region(region)
        self._postal_code = postal_code
        self._role = IdentityRole(role) if role is not None else None
        self._avatar_path = avatar_path
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def credential_hash(self) -> str:
        return self._credential_hash

    @property
    def name(self) -> str:
        return self._name

    @property
    def city(self) -> str:
        return self._city

    @property
    def region(self) -> str:
        return self._region.value

    @property
    def postal_code(self) -> str | None:
        return self._postal_code

    @property
    def role(self) -> IdentityRole | None:
        return self._role

    @property
    def avatar_path(self) -> str | None:
        return self._avatar_path

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def replace_credential(self, credential_hash: str) -> None:
        self._credential_hash = credential_hash
        self._updated_at = utc_now()

    def replace_avatar(self, avatar_path: str) -> None:
        self._avatar_path = avatar_path
        self._updated_at = utc_now()

    def update_details(
        self,
        name: str | None = None,
        city: str | None = None,
        region: str | None = None,
        postal_code: str | None = None,
    ) -> None:
        """Apply the given contact fields; None leaves a field unchanged."""
        if name is not None:
            self._name = name
        if city is not None:
            self._city = city
        if region is not None:
            self._region = Region(region)
        if postal_code is not None:
            self._postal_code = postal_code
        self._updated_at = utc_now()

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        email: Union[str, Email],
        credential_hash: str,
        name: str,
        city: str,
        region: Union[str, Region],
        postal_code: str | None = None,
        role: IdentityRole | None = None,
    ) -> "Identity":
        return cls(
            email=email,
            credential_hash=credential_hash,
            name=name,
            city=city,
            region=region,
            postal_code=postal_code,
            role=role,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        credential_hash: str,
        name: str,
        city: str,
        region: Union[str, Region],
        postal_code: str | None,
        role: Union[str, IdentityRole, None],
        avatar_path: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Identity":
        return cls(
            id=id,
            email=email,
            credential_hash=credential_hash,
            name=name,
            city=city,
            region=region,
            postal_code=postal_code,
            role=role,
            avatar_path=avatar_path,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identity):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        role = self._role.value if self._role else None
        return f"Identity(id={self._id}, email={self._email.value}, role={role})"
