"""errors.py
~~~~~~~~~
Exception taxonomy for the fleet registry.

Raised to the direct caller:
    InvalidAircraftData, DuplicateIdError, AircraftNotFound

Absorbed inside repositories (reported to the observer, never raised out
of a repository call):
    DecodeError, PersistenceError
"""

from __future__ import annotations

from pathlib import Path


class FleetError(Exception):
    """Base class for every fleet registry error."""


class InvalidAircraftData(FleetError, ValueError):
    """Blank id, negative capacity or negative range."""


class DuplicateIdError(FleetError, ValueError):
    """An aircraft with the same id already exists."""

    def __init__(self, aircraft_id: str):
        super().__init__(f"Aircraft with id {aircraft_id!r} already exists")
        self.aircraft_id = aircraft_id


class AircraftNotFound(FleetError, LookupError):
    """Lookup or removal target is absent."""

    def __init__(self, aircraft_id: str):
        super().__init__(f"Aircraft with id {aircraft_id!r} not found")
        self.aircraft_id = aircraft_id


class DecodeError(FleetError, ValueError):
    """A single persisted line could not be decoded; the line is skipped."""

    def __init__(self, reason: str, line: str):
        super().__init__(reason)
        self.reason = reason
        self.line = line


class PersistenceError(FleetError):
    """Reading or rewriting the data file failed."""

    def __init__(self, operation: str, path: Path, cause: BaseException):
        super().__init__(f"{operation} {path} failed: {cause}")
        self.operation = operation
        self.path = path
        self.cause = cause


__all__ = [
    "AircraftNotFound",
    "DecodeError",
    "DuplicateIdError",
    "FleetError",
    "InvalidAircraftData",
    "PersistenceError",
]
