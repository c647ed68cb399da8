"""Domain service: Pet Inventory.

Holds every business rule of the store: lookup by (pet type, pet id)
with duplicate detection, type-scoped sorted listings, and the
add/remove/update orchestration on top of the repository primitives.

The service keeps no state between calls. Each operation re-reads the
full record list from the repository, so it always sees what is on disk.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from petstore.domain.exceptions import (
    DuplicateRecordError,
    NotFoundError,
    UnsupportedTypeError,
)
from petstore.domain.model.pet import PetRecord
from petstore.domain.model.pet_type import PetType
from petstore.domain.repository.pet_repository import PetRepository

logger = logging.getLogger(__name__)


class PetInventoryService:

    def __init__(self, pet_repo: PetRepository) -> None:
        self._pet_repo = pet_repo

    def get_inventory(self) -> list[PetRecord]:
        """Return every record in the store, unsorted."""
        return self._pet_repo.list_all()

    def find_by_type_and_id(self, pet_type: PetType, pet_id: int) -> PetRecord:
        """Return the single record stored under (pet_type, pet_id).

        Raises NotFoundError if there is none and DuplicateRecordError
        if there is more than one.
        """
        pet = self._lookup(pet_type, pet_id)
        if pet is None:
            raise NotFoundError(
                f"0 results found for pet id [{pet_id}] "
                f"pet type [{pet_type.value}]"
            )
        return pet

    def get_by_type(self, pet_type: PetType) -> list[PetRecord]:
        """Return all records of ``pet_type`` sorted by ascending id."""
        pets = self._sorted_by_type(pet_type)
        if not pets:
            raise NotFoundError(
                f"0 results found for pet type [{pet_type.value}]"
            )
        return pets

    def add_inventory(self, pet_type: PetType, new_pet: PetRecord) -> PetRecord:
        """Store a new record of ``pet_type`` and return it with its id.

        ``pet_type`` overrides whatever type the payload carries. The
        existing records of that type are handed to the repository in id
        order so id assignment is reproducible.
        """
        existing = self._sorted_by_type(pet_type)
        new_pet = replace(new_pet, pet_type=pet_type)
        return self._pet_repo.create(new_pet, existing)

    def remove_inventory(self, pet_type: PetType, pet_id: int) -> PetRecord:
        """Remove the record stored under (pet_type, pet_id) and return it."""
        pet = self.find_by_type_and_id(pet_type, pet_id)
        return self._pet_repo.remove(pet)

    def update_inventory(
        self,
        pet_type: PetType,
        pet_id: int,
        payload: PetRecord,
    ) -> PetRecord:
        """Replace the record under (pet_type, pet_id) with ``payload``.

        If no such record exists the payload is added as a new record
        instead, so this never fails with NotFoundError. A duplicate key
        is a data-integrity error and propagates.
        """
        if not pet_type.is_supported:
            raise UnsupportedTypeError(
                f"Pet type [{pet_type.value}] is not supported by the store"
            )

        existing = self._lookup(pet_type, pet_id)
        if existing is None:
            logger.info(
                "No %s/%s in inventory, adding payload as a new record",
                pet_type.value,
                pet_id,
            )
            return self.add_inventory(pet_type, payload)

        self._pet_repo.remove(existing)
        return self._pet_repo.update(replace(payload, pet_type=pet_type), existing)

    # --- Internal helpers -----------------------------------------------------

    def _lookup(self, pet_type: PetType, pet_id: int) -> PetRecord | None:
        matches = [
            p
            for p in self._pet_repo.list_all()
            if p.pet_type == pet_type and p.pet_id == pet_id
        ]
        if len(matches) > 1:
            logger.error(
                "Duplicate records for %s/%s: %d found",
                pet_type.value,
                pet_id,
                len(matches),
            )
            raise DuplicateRecordError(
                f"Expected one record but found {len(matches)} "
                f"for pet id [{pet_id}] pet type [{pet_type.value}]"
            )
        return matches[0] if matches else None

    def _sorted_by_type(self, pet_type: PetType) -> list[PetRecord]:
        return sorted(
            (p for p in self._pet_repo.list_all() if p.pet_type == pet_type),
            key=lambda p: p.pet_id,
        )
