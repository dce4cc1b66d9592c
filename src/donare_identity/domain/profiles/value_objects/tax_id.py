"""Brazilian registry numbers (CPF, CNPJ, CNES).

Punctuated forms such as ``111.222.333-44`` are accepted and stored as
digits only.
"""

import re

from donare_identity.domain.profiles.exceptions import (
    InvalidFacilityCodeError,
    InvalidTaxIdError,
)

CPF_DIGITS = 11
CNPJ_DIGITS = 14
CNES_DIGITS = 7

_PUNCTUATION = re.compile(r"[.\-/\s]")


def _digits(value: str) -> str:
    return _PUNCTUATION.sub("", value or "")


def normalize_cpf(value: str) -> str:
    digits = _digits(value)
    if len(digits) != CPF_DIGITS or not digits.isdigit():
        raise InvalidTaxIdError(value, CPF_DIGITS)
    return digits


def normalize_cnpj(value: str) -> str:
    digits = _digits(value)
    if len(digits) != CNPJ_DIGITS or not digits.isdigit():
        raise InvalidTaxIdError(value, CNPJ_DIGITS)
    return digits


def normalize_cnes(value: str) -> str:
    digits = (value or "").strip()
    if len(digits) != CNES_DIGITS or not digits.isdigit():
        raise InvalidFacilityCodeError(value)
    return digits
