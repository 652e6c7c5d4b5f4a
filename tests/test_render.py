"""
tests/test_render.py
~~~~~~~~~~~~~~~~~~~~
Text views shared by the console and the HTML table.
"""

from __future__ import annotations

from hangar.render import TABLE_HEADERS, describe, specific_label, table_row


def test_describe_passenger(passenger):
    assert describe(passenger).splitlines() == [
        "--- Passenger aircraft ---",
        "ID: P1",
        "Model: A320",
        "Manufacturer: Airbus",
        "Capacity: 180",
        "Range: 6100.0",
        "Year: 2015",
        "Flight hours: 4500",
        "Status: In service",
        "Cabin class: Economy",
    ]


def test_specific_labels(passenger, cargo, military):
    assert specific_label(passenger) == "Cabin class"
    assert specific_label(cargo) == "Max cargo weight"
    assert specific_label(military) == "Weapon type"
    assert describe(cargo).splitlines()[-1] == "Max cargo weight: 50000.0"


def test_table_row_matches_headers(cargo):
    row = table_row(cargo)
    assert len(row) == len(TABLE_HEADERS)
    assert dict(zip(TABLE_HEADERS, row)) == {
        "ID": "C1",
        "Type": "Cargo aircraft",
        "Model": "IL-76",
        "Manufacturer": "Ilyushin",
        "Capacity": "0",
        "Range": "4500.0",
        "Year": "2010",
        "FlightHours": "12000",
        "Status": "Under repair",
        "Specific": "50000.0",
    }
