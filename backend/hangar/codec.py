"""codec.py
~~~~~~~~
One aircraft record ⇄ one line of ``;``-delimited text.

Column layout (10 columns, no header)::

    tag;id;model;manufacturer;capacity;range;year;flightHours;status;<variant>

where ``tag`` is one of ``"Passenger aircraft"``, ``"Cargo aircraft"``,
``"Military aircraft"`` and ``<variant>`` is the cabin class, the maximum
cargo weight or the weapon type.

Encoding never fails for a valid record. Decoding is lenient: a bad line
yields ``None`` (or :class:`DecodeError` from :func:`parse_line`) and the
caller moves on to the next line.

Known limitation: values are **not** escaped. A field containing ``;``
produces a row that will not decode back.
"""

from __future__ import annotations

import logging
import re
from typing import Final

from .errors import DecodeError
from .models import (
    CARGO_TAG,
    MILITARY_TAG,
    PASSENGER_TAG,
    AircraftRecord,
    Cargo,
    Military,
    Passenger,
    Variant,
)

LOG = logging.getLogger("codec")

DELIMITER: Final = ";"
COLUMN_COUNT: Final = 10

# Plain decimal literals, no "_" separators. Integers take no surrounding
# blanks; floats may be padded. "inf" and "nan" are what repr() writes.
_INT_RE: Final = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE: Final = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|nan)"
)


# ── Encoding ──────────────────────────────────────────────────────────────


def _variant_column(variant: Variant) -> str:
    if isinstance(variant, Passenger):
        return variant.cabin_class
    if isinstance(variant, Cargo):
        return repr(float(variant.max_cargo_weight))
    if isinstance(variant, Military):
        return variant.weapon_type
    raise TypeError(f"Unknown aircraft variant: {variant!r}")


def encode(record: AircraftRecord) -> str:
    """Serialise *record* to a single line (no trailing newline)."""
    return DELIMITER.join(
        [
            record.type_label,
            record.id,
            record.model,
            record.manufacturer,
            str(int(record.capacity)),
            repr(float(record.range)),
            str(int(record.year)),
            str(int(record.flight_hours)),
            record.status,
            _variant_column(record.variant),
        ]
    )


# ── Decoding ──────────────────────────────────────────────────────────────


def _int(token: str, name: str, line: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise DecodeError(f"{name} is not an integer: {token!r}", line)
    return int(token)


def _float(token: str, name: str, line: str) -> float:
    if not _FLOAT_RE.fullmatch(token.strip()):
        raise DecodeError(f"{name} is not a number: {token!r}", line)
    return float(token)


def parse_line(line: str) -> AircraftRecord:
    """
    Strictly parse one persisted line.

    Raises:
        DecodeError: Unknown tag, wrong column count or a numeric column
            that does not parse.
    """
    raw = line.rstrip("\r\n")
    parts = raw.split(DELIMITER)

    tag = parts[0]
    if tag not in (PASSENGER_TAG, CARGO_TAG, MILITARY_TAG):
        raise DecodeError(f"unknown aircraft type {tag!r}", raw)
    if len(parts) != COLUMN_COUNT:
        raise DecodeError(
            f"expected {COLUMN_COUNT} columns, got {len(parts)}", raw
        )

    capacity = _int(parts[4], "capacity", raw)
    range_km = _float(parts[5], "range", raw)
    year = _int(parts[6], "year", raw)
    flight_hours = _int(parts[7], "flight hours", raw)

    variant: Variant
    if tag == PASSENGER_TAG:
        variant = Passenger(cabin_class=parts[9])
    elif tag == CARGO_TAG:
        variant = Cargo(max_cargo_weight=_float(parts[9], "max cargo weight", raw))
    else:
        variant = Military(weapon_type=parts[9])

    return AircraftRecord(
        id=parts[1],
        model=parts[2],
        manufacturer=parts[3],
        capacity=capacity,
        range=range_km,
        year=year,
        flight_hours=flight_hours,
        status=parts[8],
        variant=variant,
    )


def decode(line: str) -> AircraftRecord | None:
    """Lenient :func:`parse_line`: logs and returns ``None`` on a bad line."""
    try:
        return parse_line(line)
    except DecodeError as exc:
        LOG.warning("[codec] Skipping line (%s): %r", exc.reason, exc.line)
        return None


__all__ = ["COLUMN_COUNT", "DELIMITER", "decode", "encode", "parse_line"]
