"""PetRecord entity, the only thing the inventory stores.

A record is identified by its pet type plus a pet id that is unique
within that type only. Everything else is descriptive payload that the
inventory service carries around without interpreting.
"""

from __future__ import annotations

from dataclasses import dataclass

from petstore.domain.exceptions import ValidationError
from petstore.domain.model.pet_type import PetType
from petstore.domain.model.value_objects import Money


@dataclass
class PetRecord:
    """A pet held in the store.

    Use ``PetRecord.new()`` for records built from user input. The
    ``__init__`` is intentionally simple so the repository can
    reconstitute persisted rows without re-validating.
    """

    pet_type: PetType
    pet_id: int | None
    name: str
    price: Money
    breed: str = ""

    @property
    def key(self) -> tuple[PetType, int | None]:
        return self.pet_type, self.pet_id

    @staticmethod
    def new(
        pet_type: PetType,
        name: str,
        price: str | int | Money,
        breed: str = "",
    ) -> PetRecord:
        """Build an unsaved record; the repository assigns ``pet_id``."""
        if not name or not name.strip():
            raise ValidationError("Pet name is required")
        if not isinstance(price, Money):
            price = Money.of(price)
        return PetRecord(
            pet_type=pet_type,
            pet_id=None,
            name=name.strip(),
            price=price,
            breed=(breed or "").strip(),
        )

    def __str__(self) -> str:
        return f"{self.pet_type.value}/{self.pet_id}"
