"""service.py
~~~~~~~~~~~~
Validation and analytics on top of any :class:`AircraftRepository`.

This is the single place where business rules are enforced:

* ``id`` must not be blank, ``capacity`` and ``range`` must not be negative
  (checked in that order, first failure wins) → :class:`InvalidAircraftData`
* ``id`` must not already exist → :class:`DuplicateIdError`
* lookups and removals of unknown ids → :class:`AircraftNotFound`

Aggregates never fail on an empty fleet: the average is ``0.0`` and the
"best record" queries return ``None``. Ties go to the record that comes
first in repository order.
"""

from __future__ import annotations

import logging

from .errors import AircraftNotFound, DuplicateIdError, InvalidAircraftData
from .events import FleetObserver, LoggingObserver, notify
from .models import AircraftRecord
from .repository import AircraftRepository

LOG = logging.getLogger("fleet_service")


class FleetService:
    """Facade used by the console menu and the HTTP front-end."""

    def __init__(
        self,
        repository: AircraftRepository,
        observer: FleetObserver | None = None,
    ) -> None:
        self._repository = repository
        self._observer = observer or LoggingObserver()
        LOG.debug("[service] Initialised with %s", type(repository).__name__)

    # ── CRUD ──────────────────────────────────────────────────────────────

    def get_all_aircraft(self) -> list[AircraftRecord]:
        return self._repository.get_all()

    def add_aircraft(self, record: AircraftRecord) -> None:
        """
        Validate *record* and store it.

        Raises:
            InvalidAircraftData: Blank id, negative capacity or negative range.
            DuplicateIdError: The repository already holds this id.
        """
        if record.id is None or not record.id.strip():
            raise InvalidAircraftData("Aircraft id must not be blank")
        if record.capacity < 0:
            raise InvalidAircraftData(
                f"Capacity must not be negative (got {record.capacity})"
            )
        if record.range < 0:
            raise InvalidAircraftData(f"Range must not be negative (got {record.range})")
        if self._repository.find_by_id(record.id) is not None:
            raise DuplicateIdError(record.id)

        self._repository.add(record)
        notify(self._observer, "aircraft_added", record)

    def find_aircraft(self, aircraft_id: str) -> AircraftRecord:
        """
        Return the record with *aircraft_id*.

        Raises:
            AircraftNotFound: No such record.
        """
        record = self._repository.find_by_id(aircraft_id)
        if record is None:
            LOG.debug("[service] Lookup miss for %s", aircraft_id)
            raise AircraftNotFound(aircraft_id)
        return record

    def remove_aircraft(self, aircraft_id: str) -> bool:
        """
        Remove the record with *aircraft_id*.

        Returns:
            Whatever the repository reports for the removal.

        Raises:
            AircraftNotFound: No such record (checked before removing).
        """
        target = self._repository.find_by_id(aircraft_id)
        if target is None:
            raise AircraftNotFound(aircraft_id)

        removed = self._repository.remove(aircraft_id)
        if removed:
            notify(self._observer, "aircraft_removed", target)
        else:
            LOG.error("[service] Repository refused to remove %s", aircraft_id)
        return removed

    # ── Analytics ─────────────────────────────────────────────────────────

    def average_capacity(self) -> float:
        """Mean capacity over the fleet; ``0.0`` when the fleet is empty."""
        records = self._repository.get_all()
        if not records:
            return 0.0
        return sum(r.capacity for r in records) / len(records)

    def max_range_aircraft(self) -> AircraftRecord | None:
        """Record with the greatest range (first one wins on ties)."""
        best: AircraftRecord | None = None
        for record in self._repository.get_all():
            if best is None or record.range > best.range:
                best = record
        return best

    def oldest_aircraft(self) -> AircraftRecord | None:
        """Record with the smallest year (first one wins on ties)."""
        oldest: AircraftRecord | None = None
        for record in self._repository.get_all():
            if oldest is None or record.year < oldest.year:
                oldest = record
        return oldest


__all__ = ["FleetService"]
