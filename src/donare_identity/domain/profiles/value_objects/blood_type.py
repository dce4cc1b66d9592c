from enum import Enum

from donare_identity.domain.profiles.exceptions import InvalidBloodTypeError


class BloodType(str, Enum):
    """The eight clinical ABO/Rh combinations."""

    A_POSITIVE = "A+"
    A_NEGATIVE = "A-"
    B_POSITIVE = "B+"
    B_NEGATIVE = "B-"
    AB_POSITIVE = "AB+"
    AB_NEGATIVE = "AB-"
    O_POSITIVE = "O+"
    O_NEGATIVE = "O-"

    @classmethod
    def parse(cls, value: "str | BloodType") -> "BloodType":
        if isinstance(value, BloodType):
            return value
        try:
            return cls(value.strip().upper())
        except (ValueError, AttributeError) as e:
            raise InvalidBloodTypeError(str(value)) from e
