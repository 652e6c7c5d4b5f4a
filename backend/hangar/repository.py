"""repository.py
~~~~~~~~~~~~~~~~
Storage contract for aircraft records plus the volatile in-memory store.

Two implementations exist and they deliberately differ:

=================  =====================  ====================
                   MemoryRepository       FileRepository
=================  =====================  ====================
duplicate id       rejected by ``add``    accepted (the service
                                          checks one layer up)
id matching        case-insensitive       case-sensitive
durability         none                   full file rewrite
=================  =====================  ====================
"""

from __future__ import annotations

import abc
import logging

from .errors import DuplicateIdError
from .models import AircraftRecord

LOG = logging.getLogger("repository")


class AircraftRepository(abc.ABC):
    """Ordered collection of records (insertion order is preserved)."""

    @abc.abstractmethod
    def add(self, record: AircraftRecord) -> None:
        """Store *record* at the end of the collection."""

    @abc.abstractmethod
    def get_all(self) -> list[AircraftRecord]:
        """Return a copy; mutating it never affects the repository."""

    @abc.abstractmethod
    def find_by_id(self, aircraft_id: str) -> AircraftRecord | None:
        """First record whose id matches, or ``None``."""

    @abc.abstractmethod
    def remove(self, aircraft_id: str) -> bool:
        """Remove every matching record; ``True`` if anything was removed."""


class MemoryRepository(AircraftRepository):
    """Volatile store for tests and throw-away sessions."""

    def __init__(self, records: list[AircraftRecord] | None = None) -> None:
        self._records: list[AircraftRecord] = []
        for record in records or []:
            self.add(record)

    @staticmethod
    def _matches(record: AircraftRecord, aircraft_id: str) -> bool:
        return record.id.lower() == aircraft_id.lower()

    def add(self, record: AircraftRecord) -> None:
        """
        Append *record*.

        Raises:
            DuplicateIdError: An id equal to ``record.id`` (ignoring case)
                is already stored.
        """
        if self.find_by_id(record.id) is not None:
            raise DuplicateIdError(record.id)
        self._records.append(record)
        LOG.debug("[memory_repo] Added %s (total: %d)", record.id, len(self._records))

    def get_all(self) -> list[AircraftRecord]:
        return list(self._records)

    def find_by_id(self, aircraft_id: str) -> AircraftRecord | None:
        for record in self._records:
            if self._matches(record, aircraft_id):
                return record
        return None

    def remove(self, aircraft_id: str) -> bool:
        kept = [r for r in self._records if not self._matches(r, aircraft_id)]
        removed = len(self._records) - len(kept)
        self._records = kept
        if removed:
            LOG.debug("[memory_repo] Removed %d record(s) with id %s", removed, aircraft_id)
        return removed > 0

    def __len__(self) -> int:
        return len(self._records)


__all__ = ["AircraftRepository", "MemoryRepository"]
