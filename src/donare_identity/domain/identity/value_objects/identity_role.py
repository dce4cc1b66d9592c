from enum import Enum


class IdentityRole(str, Enum):
    """Which role profile an identity carries."""

    DONOR = "DONOR"
    COMPANY = "COMPANY"
