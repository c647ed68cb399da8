"""Delimited-flat-file implementation of PetRepository.

The file holds a header row followed by one row per pet::

    pet_type,pet_id,name,price,breed
    DOG,1,Rex,120.00,Beagle

Every call re-reads the whole file and every mutation rewrites it.
"""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import replace
from decimal import Decimal, InvalidOperation
from pathlib import Path

from petstore.domain.exceptions import (
    DataStoreError,
    FileWriteError,
    NotFoundError,
    UnsupportedTypeError,
    ValidationError,
)
from petstore.domain.model.pet import PetRecord
from petstore.domain.model.pet_type import PetType
from petstore.domain.model.value_objects import Money
from petstore.domain.repository.pet_repository import PetRepository, next_pet_id

logger = logging.getLogger(__name__)

HEADER = ["pet_type", "pet_id", "name", "price", "breed"]


class DelimitedPetRepository(PetRepository):

    def __init__(
        self,
        file_path: Path,
        delimiter: str = ",",
        create_if_missing: bool = False,
    ) -> None:
        self._file_path = Path(file_path)
        self._delimiter = delimiter
        if create_if_missing:
            self._ensure_file()

    # --- PetRepository interface ----------------------------------------------

    def list_all(self) -> list[PetRecord]:
        return self._load()

    def create(self, record: PetRecord, existing: list[PetRecord]) -> PetRecord:
        self._check_supported(record.pet_type)
        stored = replace(record, pet_id=next_pet_id(existing))
        records = self._load()
        records.append(stored)
        self._persist(records)
        return stored

    def remove(self, record: PetRecord) -> PetRecord:
        records = self._load()
        try:
            records.remove(record)
        except ValueError as exc:
            raise NotFoundError(f"Pet {record} is not in the data file") from exc
        self._persist(records)
        return record

    def update(self, new_record: PetRecord, old_record: PetRecord) -> PetRecord:
        self._check_supported(old_record.pet_type)
        stored = replace(
            new_record,
            pet_type=old_record.pet_type,
            pet_id=old_record.pet_id,
        )
        records = self._load()
        if old_record in records:
            records[records.index(old_record)] = stored
        else:
            records.append(stored)
        self._persist(records)
        return stored

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_row(record: PetRecord) -> list[str]:
        return [
            record.pet_type.value,
            str(record.pet_id),
            record.name,
            str(record.price.amount),
            record.breed,
        ]

    def _to_domain(self, row: list[str], line_no: int) -> PetRecord:
        if len(row) != len(HEADER):
            raise DataStoreError(
                f"{self._file_path}:{line_no}: expected {len(HEADER)} fields, "
                f"got {len(row)}"
            )
        pet_type, pet_id, name, price, breed = row
        try:
            return PetRecord(
                pet_type=PetType(pet_type.strip().upper()),
                pet_id=int(pet_id),
                name=name,
                price=Money(Decimal(price.strip())),
                breed=breed,
            )
        except (ValueError, InvalidOperation, ValidationError) as exc:
            raise DataStoreError(f"{self._file_path}:{line_no}: {exc}") from exc

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> list[PetRecord]:
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise DataStoreError(f"Data file not found: {self._file_path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise DataStoreError(
                f"Could not read data file {self._file_path}: {exc}"
            ) from exc

        reader = csv.reader(io.StringIO(text), delimiter=self._delimiter)
        try:
            header = next(reader, None)
            if header is None:
                raise DataStoreError(f"Data file is empty: {self._file_path}")
            if [h.strip() for h in header] != HEADER:
                raise DataStoreError(
                    f"{self._file_path}: unexpected header {header!r}"
                )
            return [
                self._to_domain(row, reader.line_num)
                for row in reader
                if row
            ]
        except csv.Error as exc:
            raise DataStoreError(
                f"{self._file_path}:{reader.line_num}: {exc}"
            ) from exc

    def _persist(self, records: list[PetRecord]) -> None:
        buffer = io.StringIO()
        writer = csv.writer(buffer, delimiter=self._delimiter, lineterminator="\n")
        writer.writerow(HEADER)
        writer.writerows(self._to_row(r) for r in records)
        try:
            self._file_path.write_text(buffer.getvalue(), encoding="utf-8")
        except OSError as exc:
            raise FileWriteError(
                f"Could not write data file {self._file_path}: {exc}"
            ) from exc
        logger.debug("Wrote %d records to %s", len(records), self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            logger.info("Creating empty data file %s", self._file_path)
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise FileWriteError(
                    f"Could not create data directory for {self._file_path}: {exc}"
                ) from exc
            self._persist([])

    @staticmethod
    def _check_supported(pet_type: PetType) -> None:
        if not pet_type.is_supported:
            raise UnsupportedTypeError(
                f"Pet type [{pet_type.value}] is not supported by the store"
            )
