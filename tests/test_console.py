"""
tests/test_console.py
~~~~~~~~~~~~~~~~~~~~~
Menu loop driven through in-memory text streams.
"""

from __future__ import annotations

import io

import pytest

from hangar import console
from hangar.console import ConsoleUI
from hangar.repository import MemoryRepository
from hangar.service import FleetService


def _run(service: FleetService, *lines: str) -> str:
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()
    ConsoleUI(service, stdin=stdin, stdout=stdout).run()
    return stdout.getvalue()


@pytest.fixture
def service() -> FleetService:
    return FleetService(MemoryRepository())


CARGO_INPUT = (
    "1",
    "C9", "An-124", "Antonov", "0", "4800", "1990", "20000", "Active",
    "2", "150000",
)


def test_exit_immediately(service):
    out = _run(service, "0")
    assert "=== FLEET MENU ===" in out
    assert out.count("Choose a command: ") == 1


def test_eof_exits(service):
    out = _run(service)
    assert "Choose a command: " in out


def test_invalid_and_unknown_commands(service):
    out = _run(service, "abc", "9", "0")
    assert "Invalid input. Enter a command number." in out
    assert "Unknown command." in out


def test_add_cargo(service):
    out = _run(service, *CARGO_INPUT, "0")
    assert "Aircraft added." in out
    record = service.find_aircraft("C9")
    assert record.kind == "cargo"
    assert record.variant.max_cargo_weight == 150000.0
    assert record.range == 4800.0


def test_add_rejects_non_numeric_capacity(service):
    out = _run(service, "1", "X1", "m", "mf", "lots", "0")
    assert "Input error:" in out
    assert service.get_all_aircraft() == []


def test_add_reports_validation_error(service):
    out = _run(
        service,
        "1", "X1", "m", "mf", "-3", "100", "2000", "10", "ok", "1", "Economy",
        "0",
    )
    assert "Input error: Capacity must not be negative" in out
    assert service.get_all_aircraft() == []


def test_add_reports_duplicate(service):
    out = _run(service, *CARGO_INPUT, *CARGO_INPUT, "0")
    assert out.count("Aircraft added.") == 1
    assert "already exists" in out


def test_add_invalid_type(service):
    out = _run(service, "1", "X1", "m", "mf", "1", "100", "2000", "10", "ok", "7", "0")
    assert "Invalid aircraft type!" in out
    assert service.get_all_aircraft() == []


def test_show_all(service, passenger, military):
    service.add_aircraft(passenger)
    service.add_aircraft(military)
    out = _run(service, "2", "0")
    assert "=== ALL AIRCRAFT ===" in out
    assert "--- Passenger aircraft ---" in out
    assert "Weapon type: Missiles" in out


def test_show_all_empty(service):
    assert "(fleet is empty)" in _run(service, "2", "0")


def test_find(service, passenger):
    service.add_aircraft(passenger)
    out = _run(service, "3", "P1", "3", "nobody", "0")
    assert "Cabin class: Economy" in out
    assert "Aircraft not found." in out


def test_remove(service, passenger):
    service.add_aircraft(passenger)
    out = _run(service, "4", "P1", "4", "P1", "0")
    assert "Removed." in out
    assert "Aircraft not found." in out
    assert service.get_all_aircraft() == []


def test_analytics(service, passenger, cargo):
    service.add_aircraft(passenger)
    service.add_aircraft(cargo)
    out = _run(service, "5", "0")
    assert "Average capacity: 90.00" in out
    assert "Longest range: P1 A320 (6100.0 km)" in out
    assert "Oldest: C1 IL-76 (2010)" in out


def test_analytics_empty(service):
    out = _run(service, "5", "0")
    assert "Average capacity: 0.00" in out
    assert "Longest range: none" in out
    assert "Oldest: none" in out


def test_eof_mid_command_exits(service):
    out = _run(service, "1", "X1")
    assert "Model: " in out
    assert service.get_all_aircraft() == []


def test_main_with_memory_storage(monkeypatch):
    monkeypatch.setattr(console.config, "configure_logging", lambda level=None: None)
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert console.main(["--memory", "--log-level", "WARNING"]) == 0


def test_main_rejects_unknown_storage(monkeypatch):
    monkeypatch.setattr(console.config, "configure_logging", lambda level=None: None)
    monkeypatch.setattr(console.config, "STORAGE", "sqlite")
    assert console.main([]) == 1


def test_main_rejects_unknown_log_level(capsys):
    with pytest.raises(SystemExit) as info:
        console.main(["--memory", "--log-level", "chatty"])
    assert info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_main_log_level_is_case_insensitive(monkeypatch):
    seen: list[str | None] = []
    monkeypatch.setattr(console.config, "configure_logging", seen.append)
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert console.main(["--memory", "--log-level", "debug"]) == 0
    assert seen == ["DEBUG"]
