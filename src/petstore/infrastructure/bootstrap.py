"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from petstore.domain.service.pet_inventory_service import PetInventoryService
from petstore.infrastructure.config import get_settings
from petstore.infrastructure.persistence.delimited_pet_repository import (
    DelimitedPetRepository,
)


def pet_repository() -> DelimitedPetRepository:
    settings = get_settings()
    return DelimitedPetRepository(
        settings.data_file,
        delimiter=settings.delimiter,
        create_if_missing=settings.create_data_file,
    )


def inventory_service() -> PetInventoryService:
    return PetInventoryService(pet_repository())
