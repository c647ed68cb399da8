"""Abstract repository for PetRecord.

Defined in the domain layer so the domain never depends on
infrastructure. The delimited-file implementation lives in the
infrastructure layer; tests use an in-memory fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from petstore.domain.model.pet import PetRecord


def next_pet_id(existing: list[PetRecord]) -> int:
    """Id policy for new records: highest existing id of the type plus one.

    ``existing`` must already be restricted to a single pet type.
    Returns 1 when the type has no records.
    """
    ids = [p.pet_id for p in existing if p.pet_id is not None]
    if not ids:
        return 1
    return max(ids) + 1


class PetRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[PetRecord]:
        """Return every stored record in storage order.

        Raises DataStoreError if the store is missing or unreadable.
        """

    @abstractmethod
    def create(self, record: PetRecord, existing: list[PetRecord]) -> PetRecord:
        """Assign an id from ``existing`` (same pet type) and persist.

        Raises UnsupportedTypeError before writing anything if the pet
        type is not accepted, FileWriteError if persisting fails.
        """

    @abstractmethod
    def remove(self, record: PetRecord) -> PetRecord:
        """Delete the stored record equal to ``record`` and return it."""

    @abstractmethod
    def update(self, new_record: PetRecord, old_record: PetRecord) -> PetRecord:
        """Persist ``new_record`` as the replacement for ``old_record``.

        The replacement keeps the old record's pet type and pet id.
        """
