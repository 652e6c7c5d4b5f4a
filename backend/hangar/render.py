"""render.py
~~~~~~~~~~~
Plain-text views of a record, shared by the console menu and ``/fleet``.
"""

from __future__ import annotations

from typing import Final

from .models import AircraftRecord, Cargo, Military, Passenger

TABLE_HEADERS: Final = (
    "ID",
    "Type",
    "Model",
    "Manufacturer",
    "Capacity",
    "Range",
    "Year",
    "FlightHours",
    "Status",
    "Specific",
)


def specific_label(record: AircraftRecord) -> str:
    v = record.variant
    if isinstance(v, Passenger):
        return "Cabin class"
    if isinstance(v, Cargo):
        return "Max cargo weight"
    if isinstance(v, Military):
        return "Weapon type"
    raise TypeError(f"Unknown aircraft variant: {v!r}")


def specific_value(record: AircraftRecord) -> str:
    v = record.variant
    if isinstance(v, Passenger):
        return v.cabin_class
    if isinstance(v, Cargo):
        return str(v.max_cargo_weight)
    if isinstance(v, Military):
        return v.weapon_type
    raise TypeError(f"Unknown aircraft variant: {v!r}")


def describe(record: AircraftRecord) -> str:
    """Multi-line human-readable block for one record."""
    lines = [
        f"--- {record.type_label} ---",
        f"ID: {record.id}",
        f"Model: {record.model}",
        f"Manufacturer: {record.manufacturer}",
        f"Capacity: {record.capacity}",
        f"Range: {record.range}",
        f"Year: {record.year}",
        f"Flight hours: {record.flight_hours}",
        f"Status: {record.status}",
        f"{specific_label(record)}: {specific_value(record)}",
    ]
    return "\n".join(lines)


def table_row(record: AircraftRecord) -> tuple[str, ...]:
    """Cells in ``TABLE_HEADERS`` order."""
    return (
        record.id,
        record.type_label,
        record.model,
        record.manufacturer,
        str(record.capacity),
        str(record.range),
        str(record.year),
        str(record.flight_hours),
        record.status,
        specific_value(record),
    )


__all__ = ["TABLE_HEADERS", "describe", "specific_label", "specific_value", "table_row"]
