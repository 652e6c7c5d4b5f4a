"""events.py
~~~~~~~~~
Observer hooks fired by repositories and the service.

Extension points:
    - aircraft_added:      a record was accepted by the service
    - aircraft_removed:    a record was removed through the service
    - decode_skipped:      one persisted line was malformed and dropped
    - persistence_failed:  reading or rewriting the data file failed

Hooks are notifications only. Nothing a hook does changes the outcome of
the operation that fired it; an exception raised by a hook is logged and
swallowed.
"""

from __future__ import annotations

import logging

from .errors import DecodeError, PersistenceError
from .models import AircraftRecord

LOG = logging.getLogger("fleet_events")


class FleetObserver:
    """No-op base observer. Override only the hooks you care about."""

    def aircraft_added(self, record: AircraftRecord) -> None:
        pass

    def aircraft_removed(self, record: AircraftRecord) -> None:
        pass

    def decode_skipped(self, line_no: int, error: DecodeError) -> None:
        pass

    def persistence_failed(self, error: PersistenceError) -> None:
        pass


class LoggingObserver(FleetObserver):
    """Default observer: one log line per event."""

    def aircraft_added(self, record: AircraftRecord) -> None:
        LOG.info(
            "[event] added id=%s type=%s model=%s",
            record.id,
            record.type_label,
            record.model,
        )

    def aircraft_removed(self, record: AircraftRecord) -> None:
        LOG.info(
            "[event] removed id=%s type=%s model=%s",
            record.id,
            record.type_label,
            record.model,
        )

    def decode_skipped(self, line_no: int, error: DecodeError) -> None:
        LOG.warning("[event] skipped line %d (%s): %r", line_no, error.reason, error.line)

    def persistence_failed(self, error: PersistenceError) -> None:
        LOG.error("[event] persistence failure: %s", error)


def notify(observer: FleetObserver, hook: str, *args: object) -> None:
    """Invoke ``observer.<hook>(*args)``; a failing hook is logged, never raised."""
    try:
        getattr(observer, hook)(*args)
    except Exception as exc:  # noqa: BLE001
        LOG.warning("[event] observer hook %s failed: %s", hook, exc)


__all__ = ["FleetObserver", "LoggingObserver", "notify"]
