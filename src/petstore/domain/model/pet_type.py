"""Pet type enumeration and the set of types the store accepts."""

from __future__ import annotations

from enum import Enum

from petstore.domain.exceptions import ValidationError


class PetType(Enum):
    DOG = "DOG"
    CAT = "CAT"
    BIRD = "BIRD"
    FISH = "FISH"
    RABBIT = "RABBIT"
    REPTILE = "REPTILE"
    WILD = "WILD"
    FARM = "FARM"

    @property
    def is_supported(self) -> bool:
        return self in SUPPORTED_PET_TYPES

    @staticmethod
    def parse(value: str) -> PetType:
        """Case-insensitive lookup by name, e.g. ``"dog"`` -> ``PetType.DOG``."""
        try:
            return PetType(value.strip().upper())
        except (ValueError, AttributeError) as exc:
            raise ValidationError(f"Unknown pet type: {value!r}") from exc


# Wild and farm animals are never stocked.
SUPPORTED_PET_TYPES = frozenset(
    t for t in PetType if t not in (PetType.WILD, PetType.FARM)
)
