"""models.py
~~~~~~~~~
The aircraft record and its closed set of variants.

Every record carries the shared attributes plus exactly **one** variant
payload:

* ``Passenger`` – ``cabin_class`` (free text, e.g. "Economy")
* ``Cargo``     – ``max_cargo_weight`` (kg, float)
* ``Military``  – ``weapon_type`` (free text)

Records are frozen. Identity is the ``id`` field; uniqueness is a
repository/service concern, not something a record knows about.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, Union

# ── Variant tags (persisted literally as the first column) ────────────────
PASSENGER_TAG: Final = "Passenger aircraft"
CARGO_TAG: Final = "Cargo aircraft"
MILITARY_TAG: Final = "Military aircraft"

KINDS: Final = ("passenger", "cargo", "military")


@dataclass(frozen=True)
class Passenger:
    cabin_class: str


@dataclass(frozen=True)
class Cargo:
    max_cargo_weight: float


@dataclass(frozen=True)
class Military:
    weapon_type: str


Variant = Union[Passenger, Cargo, Military]


@dataclass(frozen=True)
class AircraftRecord:
    """One aircraft entry in the fleet."""

    id: str
    model: str
    manufacturer: str
    capacity: int
    range: float
    year: int
    flight_hours: int
    status: str
    variant: Variant

    @property
    def kind(self) -> str:
        """Short variant key: ``passenger``, ``cargo`` or ``military``."""
        v = self.variant
        if isinstance(v, Passenger):
            return "passenger"
        if isinstance(v, Cargo):
            return "cargo"
        if isinstance(v, Military):
            return "military"
        raise TypeError(f"Unknown aircraft variant: {v!r}")

    @property
    def type_label(self) -> str:
        """Tag literal written in the first column of the data file."""
        return TAG_BY_KIND[self.kind]


TAG_BY_KIND: Final[dict[str, str]] = {
    "passenger": PASSENGER_TAG,
    "cargo": CARGO_TAG,
    "military": MILITARY_TAG,
}


def build_record(
    kind: str,
    specific: Any,
    *,
    id: str,
    model: str,
    manufacturer: str,
    capacity: int,
    range: float,
    year: int,
    flight_hours: int,
    status: str,
) -> AircraftRecord:
    """
    Build a record from a variant key and its raw subtype-specific value.

    Args:
        kind: One of ``KINDS`` (case-insensitive).
        specific: Cabin class, cargo weight or weapon type. The cargo
            weight may be given as text; it is parsed as a float.

    Raises:
        ValueError: Unknown *kind* or a cargo weight that is not a number.
    """
    key = kind.strip().lower()
    if key not in KINDS:
        raise ValueError(f"Unknown aircraft type: {kind!r}")

    variant: Variant
    if key == "passenger":
        variant = Passenger(cabin_class=str(specific))
    elif key == "cargo":
        variant = Cargo(max_cargo_weight=float(specific))
    else:
        variant = Military(weapon_type=str(specific))

    return AircraftRecord(
        id=id,
        model=model,
        manufacturer=manufacturer,
        capacity=int(capacity),
        range=float(range),
        year=int(year),
        flight_hours=int(flight_hours),
        status=status,
        variant=variant,
    )


def specific_field(record: AircraftRecord) -> tuple[str, str | float]:
    """Return ``(field_name, value)`` of the record's variant payload."""
    v = record.variant
    if isinstance(v, Passenger):
        return "cabin_class", v.cabin_class
    if isinstance(v, Cargo):
        return "max_cargo_weight", v.max_cargo_weight
    if isinstance(v, Military):
        return "weapon_type", v.weapon_type
    raise TypeError(f"Unknown aircraft variant: {v!r}")


def to_dict(record: AircraftRecord) -> dict[str, Any]:
    """JSON-ready mapping of *record* (shared fields + its variant field)."""
    name, value = specific_field(record)
    return {
        "type": record.kind,
        "id": record.id,
        "model": record.model,
        "manufacturer": record.manufacturer,
        "capacity": record.capacity,
        "range": record.range,
        "year": record.year,
        "flight_hours": record.flight_hours,
        "status": record.status,
        name: value,
    }


__all__ = [
    "AircraftRecord",
    "Cargo",
    "CARGO_TAG",
    "KINDS",
    "Military",
    "MILITARY_TAG",
    "Passenger",
    "PASSENGER_TAG",
    "TAG_BY_KIND",
    "Variant",
    "build_record",
    "specific_field",
    "to_dict",
]
