"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and the inventory service without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from petstore.domain.model.pet import PetRecord
from petstore.domain.model.pet_type import PetType


@dataclass(frozen=True)
class PetSpec:
    """Input: the descriptive fields a caller supplies for a pet."""

    name: str
    price: str
    breed: str = ""

    def to_record(self, pet_type: PetType) -> PetRecord:
        return PetRecord.new(pet_type, self.name, self.price, self.breed)


@dataclass(frozen=True)
class PetDTO:
    """Output: a single pet as displayed to the user."""

    pet_type: str
    pet_id: int
    name: str
    price: str  # formatted, e.g. "$15.00"
    breed: str

    @staticmethod
    def from_record(pet: PetRecord) -> PetDTO:
        return PetDTO(
            pet_type=pet.pet_type.value,
            pet_id=pet.pet_id,
            name=pet.name,
            price=str(pet.price),
            breed=pet.breed,
        )
