"""Archive store: the persisted, newest-first collection of specimens."""

import logging
from typing import Iterator

from pydantic import ValidationError

from ..core.models import SpecimenProfile
from ..storage import ARCHIVE_KEY, KeyValueStore


logger = logging.getLogger(__name__)


class ArchiveStore:
    """Ordered specimen collection with write-through persistence.

    Records are kept newest first and are unique by id. Every mutation
    (``insert`` or ``remove``) writes the whole collection back to storage
    before returning. Lookups are linear scans; archives are small.

    Args:
        storage: Durable key-value store holding the archive.
        key: Storage key for the serialized collection.
    """

    def __init__(self, storage: KeyValueStore, key: str = ARCHIVE_KEY) -> None:
        self._storage = storage
        self._key = key
        self._records: list[SpecimenProfile] = []

    def load(self) -> None:
        """Replace in-memory state with the persisted collection.

        Unreadable or malformed data yields an empty archive; individual
        records that fail validation are skipped. Nothing is raised.
        """
        self._records = []
        try:
            raw = self._storage.get(self._key)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load archive, starting empty: {e}")
            return

        if raw is None:
            return
        if not isinstance(raw, list):
            logger.warning(
                f"Archive data is {type(raw).__name__}, expected list; starting empty"
            )
            return

        seen: set[str] = set()
        for index, item in enumerate(raw):
            try:
                record = SpecimenProfile.model_validate(item)
            except ValidationError as e:
                logger.warning(f"Skipping unreadable archive record #{index}: {e.error_count()} errors")
                continue
            if record.id in seen:
                logger.warning(f"Skipping duplicate archive record {record.id}")
                continue
            seen.add(record.id)
            self._records.append(record)

        logger.info(f"Loaded {len(self._records)} specimens from archive")

    def persist(self) -> None:
        """Write the full ordered collection to storage."""
        self._write(self._records)

    def _write(self, records: list[SpecimenProfile]) -> None:
        self._storage.set(self._key, [record.model_dump(mode="json") for record in records])

    def insert(self, record: SpecimenProfile) -> None:
        """Prepend a record and persist.

        In-memory state only changes once the write succeeds.

        Raises:
            ValueError: If a record with the same id is already archived.
        """
        if self.get(record.id) is not None:
            raise ValueError(f"Specimen {record.id} is already archived")
        records = [record, *self._records]
        self._write(records)
        self._records = records
        logger.info(f"Archived specimen {record.id} ({record.name})")

    def remove(self, specimen_id: str) -> bool:
        """Remove the record with this id and persist.

        Returns:
            True if a record was removed, False if the id was not found.
        """
        remaining = [r for r in self._records if r.id != specimen_id]
        removed = len(remaining) != len(self._records)
        self._write(remaining)
        self._records = remaining
        if removed:
            logger.info(f"Removed specimen {specimen_id}")
        return removed

    def get(self, specimen_id: str) -> SpecimenProfile | None:
        for record in self._records:
            if record.id == specimen_id:
                return record
        return None

    def find_by_prefix(self, prefix: str) -> list[SpecimenProfile]:
        """Records whose id starts with prefix, for abbreviated ids on the CLI."""
        return [r for r in self._records if r.id.startswith(prefix)]

    @property
    def specimens(self) -> tuple[SpecimenProfile, ...]:
        """Snapshot of the collection, newest first."""
        return tuple(self._records)

    def __iter__(self) -> Iterator[SpecimenProfile]:
        return iter(tuple(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, specimen_id: object) -> bool:
        return isinstance(specimen_id, str) and self.get(specimen_id) is not None
