"""
Generic record store over a key-value backend.

A store owns one document type's collection, kept as a single JSON array
under ``storage_key``. Every mutation reads the whole collection, changes
it in memory and rewrites the whole blob. Derived totals are recomputed on
every write so stored amounts always match the stored items.

When no backend is injected, or the backend reports it is unavailable,
reads return an empty collection and writes are skipped.
"""

import json
import logging
from typing import Callable, Generic, Iterable, List, Optional, Type, TypeVar
from uuid import uuid4

from quotebook.exceptions import StorageError
from quotebook.models.schemas import BaseDocument
from quotebook.repositories.kv_store import KeyValueStore
from quotebook.services.total_calculator import calculate_totals, with_line_totals
from quotebook.utils.parsing import today_iso

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=BaseDocument)


def _new_id() -> str:
    return str(uuid4())


class RecordStore(Generic[D]):
    """Persistence facade for one document type."""

    storage_key: str = ""
    record_type: Type[BaseDocument] = BaseDocument

    def __init__(self, kv_store: Optional[KeyValueStore],
                 id_factory: Callable[[], str] = _new_id,
                 clock: Callable[[], str] = today_iso):
        """
        Initialize the store.

        Args:
            kv_store: Backend holding the serialized collection, or None when
                no storage exists in this context
            id_factory: Produces a fresh unique id for each added record
            clock: Returns today's date as YYYY-MM-DD
        """
        self.kv_store = kv_store
        self.id_factory = id_factory
        self.clock = clock

    def _is_available(self) -> bool:
        return self.kv_store is not None and self.kv_store.is_available()

    def _load(self) -> List[D]:
        if not self._is_available():
            logger.debug(f"Storage unavailable, reading {self.storage_key} as empty")
            return []

        raw = self.kv_store.get(self.storage_key)
        if not raw:
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Stored {self.storage_key} collection is not valid JSON: {str(e)}")
            raise StorageError(f"Stored {self.storage_key} collection is not valid JSON") from e

        if not isinstance(data, list):
            logger.error(f"Stored {self.storage_key} collection is a {type(data).__name__}, expected a list")
            raise StorageError(f"Stored {self.storage_key} collection is not a JSON array")

        return [self.record_type.from_dict(item) for item in data]

    def _save(self, records: List[D]) -> None:
        if not self._is_available():
            logger.warning(f"Storage unavailable, skipping write of {len(records)} {self.storage_key}")
            return
        self.kv_store.set(self.storage_key, json.dumps([record.to_dict() for record in records]))

    def _with_totals(self, record: D) -> D:
        items = with_line_totals(record.items)
        totals = calculate_totals(items, record.tax_rate)
        return record.copy(
            items=items,
            sub_total=totals.sub_total,
            tax_amount=totals.tax_amount,
            total_amount=totals.total_amount,
        )

    def _prepare_new(self, record: D) -> D:
        """Hook for document types that fill extra fields on creation."""
        return record

    def list(self) -> List[D]:
        """Return the whole collection in insertion order."""
        return self._load()

    def count(self) -> int:
        return len(self._load())

    def get_by_id(self, record_id: str) -> Optional[D]:
        """
        Get a record by its id.

        Args:
            record_id: Id assigned when the record was added

        Returns:
            The record, or None if not found
        """
        for record in self._load():
            if record.id == record_id:
                return record
        return None

    def add(self, data: D) -> D:
        """
        Add a new record.

        Any id, created_at or totals on ``data`` are replaced: the record gets
        a fresh id, today's date as created_at and totals computed from its
        items and tax rate.

        Args:
            data: Record contents

        Returns:
            The stored record
        """
        record = self._prepare_new(data.copy(id=self.id_factory(), created_at=self.clock()))
        record = self._with_totals(record)

        records = self._load()
        records.append(record)
        self._save(records)
        logger.info(f"Added {self.storage_key} record {record.id} (total {record.total_amount:.2f})")
        return record

    def update(self, record: D) -> Optional[D]:
        """
        Replace an existing record, keeping its position and created_at.

        Args:
            record: New contents; ``record.id`` selects the record to replace

        Returns:
            The stored record, or None if no record has that id
        """
        records = self._load()
        index = next((i for i, existing in enumerate(records) if existing.id == record.id), None)
        if index is None:
            logger.warning(f"{self.storage_key} record {record.id} not found for update")
            return None

        updated = self._with_totals(record.copy(created_at=records[index].created_at))
        records[index] = updated
        self._save(records)
        logger.info(f"Updated {self.storage_key} record {updated.id} (total {updated.total_amount:.2f})")
        return updated

    def delete(self, record_id: str) -> bool:
        """
        Delete a record by id.

        Returns:
            True if a record was removed, False if none had that id
        """
        records = self._load()
        remaining = [record for record in records if record.id != record_id]
        if len(remaining) == len(records):
            logger.warning(f"{self.storage_key} record {record_id} not found for deletion")
            return False

        self._save(remaining)
        logger.info(f"Deleted {self.storage_key} record {record_id}")
        return True

    def seed(self, records: Iterable[D]) -> int:
        """
        Store sample records, but only into an empty collection.

        Records without an id or created_at get them assigned; totals are
        always recomputed.

        Returns:
            Number of records written (0 when the collection already had data)
        """
        if not self._is_available():
            logger.warning(f"Storage unavailable, skipping seed of {self.storage_key}")
            return 0
        if self._load():
            logger.info(f"{self.storage_key} already has data, skipping seed")
            return 0

        seeded = []
        for record in records:
            record = record.copy(
                id=record.id or self.id_factory(),
                created_at=record.created_at or self.clock(),
            )
            seeded.append(self._with_totals(record))

        self._save(seeded)
        logger.info(f"Seeded {len(seeded)} {self.storage_key} records")
        return len(seeded)
