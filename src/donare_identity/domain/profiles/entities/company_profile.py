"""Company (health facility) profile entity."""

from datetime import datetime
from uuid import UUID, uuid4

from donare_identity.domain.profiles.value_objects import normalize_cnes, normalize_cnpj
from donare_identity.domain.shared.exceptions import ValidationError
from donare_identity.domain.shared.time import utc_now

INSTITUTION_NAME_MAX_LENGTH = 100


class CompanyProfile:
    """Company-specific data attached one-to-one to an Identity."""

    def __init__(  # noqa: PLR0913
        self,
        owner_id: UUID,
        tax_id: str,
        institution_name: str,
        facility_code: str,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._owner_id = owner_id
        self._tax_id = normalize_cnpj(tax_id)
        self._institution_name = self._validate_name(institution_name)
        self._facility_code = normalize_cnes(facility_code)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @staticmethod
    def _validate_name(name: str) -> str:
        name = (name or "").strip()
        if not name:
            msg = "Institution name cannot be empty"
            raise ValidationError(msg)
        if len(name) > INSTITUTION_NAME_MAX_LENGTH:
            msg = f"Institution name cannot exceed {INSTITUTION_NAME_MAX_LENGTH} characters"
            raise ValidationError(msg)
        return name

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
    def institution_name(self) -> str:
        return self._institution_name

    @property
    def facility_code(self) -> str:
        return self._facility_code

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def rename(self, institution_name: str) -> None:
        self._institution_name = self._validate_name(institution_name)
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        owner_id: UUID,
        tax_id: str,
        institution_name: str,
        facility_code: str,
    ) -> "CompanyProfile":
        return cls(
            owner_id=owner_id,
            tax_id=tax_id,
            institution_name=institution_name,
            facility_code=facility_code,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompanyProfile):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"CompanyProfile(id={self._id}, owner_id={self._owner_id}, "
            f"institution_name={self._institution_name!r})"
        )
