"""console.py
~~~~~~~~~~~~
Interactive text menu over :class:`FleetService`.

Run with ``hangar-console`` or ``python -m hangar.console``::

    === FLEET MENU ===
    1. Add aircraft
    2. Show all aircraft
    3. Find aircraft by ID
    4. Remove aircraft
    5. Analytics
    0. Exit

Input errors and service errors are printed and the menu continues; EOF
on stdin exits like ``0``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, TextIO

from . import config
from .errors import AircraftNotFound
from .models import build_record
from .render import describe
from .service import FleetService

LOG = logging.getLogger("console")

MENU = """
=== FLEET MENU ===
1. Add aircraft
2. Show all aircraft
3. Find aircraft by ID
4. Remove aircraft
5. Analytics
0. Exit"""

TYPE_MENU = """
Aircraft type:
1. Passenger
2. Cargo
3. Military"""

# menu number → (variant key, prompt for the subtype field)
AIRCRAFT_TYPES: dict[str, tuple[str, str]] = {
    "1": ("passenger", "Cabin class (Economy/Business): "),
    "2": ("cargo", "Max cargo weight (kg): "),
    "3": ("military", "Weapon type: "),
}


class _EndOfInput(Exception):
    """stdin was closed."""


class ConsoleUI:
    """Menu loop bound to one service and one pair of text streams."""

    def __init__(
        self,
        service: FleetService,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.service = service
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout
        self._commands: dict[int, Callable[[], None]] = {
            1: self.add_aircraft,
            2: self.show_all,
            3: self.find_aircraft,
            4: self.remove_aircraft,
            5: self.analytics,
        }

    # ── I/O helpers ───────────────────────────────────────────────────────

    def _print(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def _ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise _EndOfInput
        return line.rstrip("\r\n")

    # ── Main loop ─────────────────────────────────────────────────────────

    def run(self) -> None:
        """Show the menu until the user picks 0 or stdin closes."""
        while True:
            self._print(MENU)
            try:
                choice = self._ask("Choose a command: ").strip()
            except _EndOfInput:
                self._print()
                return

            try:
                cmd = int(choice)
            except ValueError:
                self._print("Invalid input. Enter a command number.")
                continue

            if cmd == 0:
                return
            action = self._commands.get(cmd)
            if action is None:
                self._print("Unknown command.")
                continue
            try:
                action()
            except _EndOfInput:
                self._print()
                return

    # ── Commands ──────────────────────────────────────────────────────────

    def add_aircraft(self) -> None:
        try:
            aircraft_id = self._ask("ID: ")
            model = self._ask("Model: ")
            manufacturer = self._ask("Manufacturer: ")
            capacity = int(self._ask("Capacity: "))
            range_km = float(self._ask("Range (km): "))
            year = int(self._ask("Year of manufacture: "))
            hours = int(self._ask("Flight hours: "))
            status = self._ask("Status (e.g. 'Active'): ")

            self._print(TYPE_MENU)
            choice = self._ask("Enter a number: ").strip()
            if choice not in AIRCRAFT_TYPES:
                self._print("Invalid aircraft type!")
                return
            kind, prompt = AIRCRAFT_TYPES[choice]
            specific = self._ask(prompt)

            record = build_record(
                kind,
                specific,
                id=aircraft_id,
                model=model,
                manufacturer=manufacturer,
                capacity=capacity,
                range=range_km,
                year=year,
                flight_hours=hours,
                status=status,
            )
            self.service.add_aircraft(record)
        except ValueError as exc:
            # FleetError subclasses that are ValueErrors land here too
            self._print(f"Input error: {exc}")
            return
        self._print("Aircraft added.")

    def show_all(self) -> None:
        self._print("\n=== ALL AIRCRAFT ===")
        records = self.service.get_all_aircraft()
        if not records:
            self._print("(fleet is empty)")
        for record in records:
            self._print(describe(record))

    def find_aircraft(self) -> None:
        aircraft_id = self._ask("Enter ID: ")
        try:
            record = self.service.find_aircraft(aircraft_id)
        except AircraftNotFound:
            self._print("Aircraft not found.")
            return
        self._print(describe(record))

    def remove_aircraft(self) -> None:
        aircraft_id = self._ask("Enter ID: ")
        try:
            removed = self.service.remove_aircraft(aircraft_id)
        except AircraftNotFound:
            self._print("Aircraft not found.")
            return
        self._print("Removed." if removed else "Aircraft could not be removed.")

    def analytics(self) -> None:
        self._print("\n=== ANALYTICS ===")
        self._print(f"Average capacity: {self.service.average_capacity():.2f}")

        longest = self.service.max_range_aircraft()
        oldest = self.service.oldest_aircraft()
        self._print(
            "Longest range: "
            + (f"{longest.id} {longest.model} ({longest.range} km)" if longest else "none")
        )
        self._print(
            "Oldest: " + (f"{oldest.id} {oldest.model} ({oldest.year})" if oldest else "none")
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Aircraft fleet console")
    parser.add_argument("--data-file", help="fleet data file (default: HANGAR_DATA_FILE)")
    parser.add_argument(
        "--memory", action="store_true", help="keep the fleet in memory only"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=config.LEVEL_NAMES,
        help="logging level (default: HANGAR_LOG_LEVEL)",
    )
    args = parser.parse_args(argv)

    config.configure_logging(args.log_level)
    try:
        service = config.build_service(
            storage="memory" if args.memory else None,
            data_file=args.data_file,
        )
    except ValueError as exc:
        LOG.error("[console] Could not start: %s", exc)
        return 1

    LOG.info("[console] Fleet console started")
    ConsoleUI(service).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
