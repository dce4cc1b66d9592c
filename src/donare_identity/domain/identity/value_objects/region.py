"""Region (federative unit) value object."""

import re
from dataclasses import dataclass

from donare_identity.domain.identity.exceptions import InvalidRegionError

REGION_PATTERN = re.compile(r"^[A-Z]{2}$")


@dataclass(frozen=True)
class Region:
    """Two-letter state code, stored upper-case."""

    value: str

    def __post_init__(self) -> None:
        normalized = (self.value or "").strip().upper()
        if not REGION_PATTERN.match(normalized):
            raise InvalidRegionError(self.value)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
