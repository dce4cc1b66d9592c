from donare_identity.domain.profiles.value_objects.blood_type import BloodType
from donare_identity.domain.profiles.value_objects.tax_id import (
    normalize_cnes,
    normalize_cnpj,
    normalize_cpf,
)

__all__ = [
    "BloodType",
    "normalize_cnes",
    "normalize_cnpj",
    "normalize_cpf",
]
