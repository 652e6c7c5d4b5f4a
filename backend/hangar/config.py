"""config.py
~~~~~~~~~~~
Environment-driven settings and the factory that wires the service stack.

Configuration (environment or ``.env``):
    HANGAR_DATA_FILE:     Path of the fleet data file (default: data/aircrafts.csv)
    HANGAR_STORAGE:       "file" or "memory" (default: file)
    HANGAR_LOG_LEVEL:     Root level for the entry points (default: INFO)
    HANGAR_CORS_ORIGINS:  Comma-separated origins allowed by the HTTP front-end
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

from .events import FleetObserver, LoggingObserver
from .file_repository import FileRepository
from .repository import AircraftRepository, MemoryRepository
from .service import FleetService

load_dotenv()

# ── Settings ──────────────────────────────────────────────────────────────
DATA_FILE = Path(os.getenv("HANGAR_DATA_FILE", "data/aircrafts.csv")).expanduser()
STORAGE = os.getenv("HANGAR_STORAGE", "file").strip().lower()
LOG_LEVEL = os.getenv("HANGAR_LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "HANGAR_CORS_ORIGINS", "http://localhost:8090,http://127.0.0.1:8090"
    ).split(",")
    if origin.strip()
]

LOG = logging.getLogger("config")

# Shared by both entry points; attached to the root logger at most once
_handler = logging.StreamHandler(sys.stdout)
_handler.setFormatter(logging.Formatter("%(levelname)s:     %(name)s - %(message)s"))


LEVEL_NAMES: Final = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def configure_logging(level: str | None = None) -> None:
    """
    Send every module logger to stdout at *level* (default HANGAR_LOG_LEVEL).

    An unknown level name falls back to INFO with a warning.
    """
    root = logging.getLogger()
    if _handler not in root.handlers:
        root.addHandler(_handler)

    name = (level or LOG_LEVEL).strip().upper()
    if name not in LEVEL_NAMES:
        root.setLevel(logging.INFO)
        LOG.warning("[config] Unknown log level %r, using INFO", name)
        return
    root.setLevel(name)


# ── Wiring ────────────────────────────────────────────────────────────────


def build_repository(
    storage: str | None = None,
    data_file: str | os.PathLike[str] | None = None,
    observer: FleetObserver | None = None,
) -> AircraftRepository:
    """
    Create the configured repository.

    Raises:
        ValueError: *storage* is neither "file" nor "memory".
    """
    kind = (storage or STORAGE).strip().lower()
    if kind == "memory":
        LOG.info("[config] Using in-memory storage")
        return MemoryRepository()
    if kind == "file":
        path = Path(data_file) if data_file is not None else DATA_FILE
        LOG.info("[config] Using file storage at %s", path)
        return FileRepository(path, observer=observer)
    raise ValueError(f"Unsupported HANGAR_STORAGE: {kind!r}")


def build_service(
    storage: str | None = None,
    data_file: str | os.PathLike[str] | None = None,
    observer: FleetObserver | None = None,
) -> FleetService:
    """Repository + service sharing one observer."""
    observer = observer or LoggingObserver()
    repository = build_repository(storage, data_file, observer)
    return FleetService(repository, observer=observer)


__all__ = [
    "CORS_ORIGINS",
    "DATA_FILE",
    "LEVEL_NAMES",
    "LOG_LEVEL",
    "STORAGE",
    "build_repository",
    "build_service",
    "configure_logging",
]
