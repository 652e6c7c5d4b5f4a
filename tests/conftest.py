"""
tests/conftest.py
~~~~~~~~~~~~~~~~~
Global pytest fixtures.

`isolate_data_file` points the configured fleet file at a per-test
temporary directory, so nothing is ever written under `data/` while the
suite runs.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Any, Callable

import pytest

from hangar.errors import DecodeError, PersistenceError
from hangar.events import FleetObserver
from hangar.models import AircraftRecord, Cargo, Military, Passenger

SAMPLE_FILE = (
    "Passenger aircraft;1;a1;airbus;150;12000.0;2020;1500;Under repair;Economy\n"
    "Cargo aircraft;2;a2;boeing;0;8000.0;2018;3000;Active;5000\n"
    "Military aircraft;3;a3;sukhoi;1;1500.0;2010;700;Combat ready;Missiles\n"
)


@pytest.fixture(autouse=True)
def isolate_data_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Redirect ``config.DATA_FILE`` to *tmp_path* for every test.

    ``config`` reads the environment at import time, so the module
    attribute is patched as well as the variable.
    """
    data_file = tmp_path / "data" / "aircrafts.csv"
    monkeypatch.setenv("HANGAR_DATA_FILE", str(data_file))

    from hangar import config

    monkeypatch.setattr(config, "DATA_FILE", data_file)
    monkeypatch.setattr(config, "STORAGE", "file")
    return data_file


class RecordingObserver(FleetObserver):
    """Observer that remembers every hook call."""

    def __init__(self) -> None:
        self.added: list[AircraftRecord] = []
        self.removed: list[AircraftRecord] = []
        self.skipped: list[tuple[int, DecodeError]] = []
        self.failures: list[PersistenceError] = []

    def aircraft_added(self, record: AircraftRecord) -> None:
        self.added.append(record)

    def aircraft_removed(self, record: AircraftRecord) -> None:
        self.removed.append(record)

    def decode_skipped(self, line_no: int, error: DecodeError) -> None:
        self.skipped.append((line_no, error))

    def persistence_failed(self, error: PersistenceError) -> None:
        self.failures.append(error)


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def passenger() -> AircraftRecord:
    return AircraftRecord(
        id="P1",
        model="A320",
        manufacturer="Airbus",
        capacity=180,
        range=6100.0,
        year=2015,
        flight_hours=4500,
        status="In service",
        variant=Passenger(cabin_class="Economy"),
    )


@pytest.fixture
def cargo() -> AircraftRecord:
    return AircraftRecord(
        id="C1",
        model="IL-76",
        manufacturer="Ilyushin",
        capacity=0,
        range=4500.0,
        year=2010,
        flight_hours=12000,
        status="Under repair",
        variant=Cargo(max_cargo_weight=50000.0),
    )


@pytest.fixture
def military() -> AircraftRecord:
    return AircraftRecord(
        id="M1",
        model="Su-35",
        manufacturer="Sukhoi",
        capacity=1,
        range=3600.0,
        year=2018,
        flight_hours=800,
        status="At base",
        variant=Military(weapon_type="Missiles"),
    )


@pytest.fixture
def invalid_copy() -> Callable[..., AircraftRecord]:
    """
    Builder for records that break a business rule.

    Records are frozen, so a "bad" record is a copy of a good one with
    the offending fields replaced, e.g. ``invalid_copy(rec, capacity=-1)``.
    """

    def _build(record: AircraftRecord, **changes: Any) -> AircraftRecord:
        return dataclasses.replace(record, **changes)

    return _build


@pytest.fixture
def sample_text() -> str:
    """Three well-formed lines, one per aircraft type."""
    return SAMPLE_FILE
