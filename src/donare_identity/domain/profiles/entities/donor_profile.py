"""Donor profile entity."""

from datetime import date, datetime
from typing import Union
from uuid import UUID, uuid4

from donare_identity.domain.profiles.value_objects import BloodType, normalize_cpf
from donare_identity.domain.shared.exceptions import ValidationError
from donare_identity.domain.shared.time import today_utc, utc_now


class DonorProfile:
    """Donor-specific data attached one-to-one to an Identity."""

    def __init__(  # noqa: PLR0913
        self,
        owner_id: UUID,
        tax_id: str,
        blood_type: Union[str, BloodType],
        birth_date: date,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        if birth_date > today_utc():
            msg = "Birth date cannot be in the future"
            raise ValidationError(msg)

        self._id = id or uuid4()
        self._owner_id = owner_id
        self._tax_id = normalize_cpf(tax_id)
        self._blood_type = BloodType.parse(blood_type)
        self._birth_date = birth_date
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def owner_id(self) -> UUID:
        return self._owner_id

    @property
    def tax_id(self) -> str:
        return self._tax_id

    @property
    def blood_type(self) -> BloodType:
        return self._blood_type

    @property
    def birth_date(self) -> date:
        return self._birth_date

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_blood_type(self, blood_type: Union[str, BloodType]) -> None:
        self._blood_type = BloodType.parse(blood_type)
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        owner_id: UUID,
        tax_id: str,
        blood_type: Union[str, BloodType],
        birth_date: date,
    ) -> "DonorProfile":
        return cls(
            owner_id=owner_id,
            tax_id=tax_id,
            blood_type=blood_type,
            birth_date=birth_date,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DonorProfile):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"DonorProfile(id={self._id}, owner_id={self._owner_id}, "
            f"blood_type={self._blood_type.value})"
        )
