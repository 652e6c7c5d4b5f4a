"""file_repository.py
~~~~~~~~~~~~~~~~~~~~~
Durable aircraft store backed by one flat ``;``-delimited file.

* Every mutation rewrites the **whole** file (truncate + re-encode all
  records). There is no append-only path and no write-ahead copy, so a
  crash mid-write can leave a truncated file behind.
* Malformed lines are dropped on load and reported through the observer's
  ``decode_skipped`` hook. Each line is decoded on its own, so a line that
  is not valid UTF-8 is skipped like any other bad line.
* I/O errors while loading or saving are reported through
  ``persistence_failed`` and are **not** raised. The in-memory state stays
  usable, but it may no longer match what is on disk: silent data loss is
  possible.
* Ids match case-sensitively and duplicates are not rejected here; the
  service layer enforces uniqueness.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .codec import encode, parse_line
from .errors import DecodeError, PersistenceError
from .events import FleetObserver, LoggingObserver, notify
from .models import AircraftRecord
from .repository import AircraftRepository

LOG = logging.getLogger("file_repository")

ENCODING = "utf-8"


class FileRepository(AircraftRepository):
    """Repository persisted to *path*; loads eagerly on construction."""

    def __init__(
        self,
        path: str | os.PathLike[str],
        observer: FleetObserver | None = None,
    ) -> None:
        self._path = Path(path).expanduser()
        self._observer = observer or LoggingObserver()
        self._records: list[AircraftRecord] = []
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    # ── Persistence ───────────────────────────────────────────────────────

    def _load(self) -> None:
        """Read the backing file into memory, skipping bad lines."""
        if not self._path.exists():
            LOG.warning("[file_repo] %s not found, starting empty", self._path)
            return

        LOG.info("[file_repo] Loading aircraft from %s", self._path)
        try:
            with self._path.open("rb") as fh:
                for line_no, raw in enumerate(fh, start=1):
                    try:
                        line = raw.decode(ENCODING)
                    except UnicodeDecodeError as exc:
                        bad = DecodeError(
                            f"not valid {ENCODING}: {exc.reason}",
                            raw.decode(ENCODING, errors="replace").rstrip("\r\n"),
                        )
                        notify(self._observer, "decode_skipped", line_no, bad)
                        continue
                    if not line.strip():
                        continue
                    try:
                        record = parse_line(line)
                    except DecodeError as exc:
                        notify(self._observer, "decode_skipped", line_no, exc)
                        continue
                    self._records.append(record)
                    LOG.debug(
                        "[file_repo] Loaded id=%s type=%s model=%s",
                        record.id,
                        record.type_label,
                        record.model,
                    )
        except OSError as exc:
            notify(self._observer, "persistence_failed", PersistenceError("load", self._path, exc))
            return

        LOG.info("[file_repo] Loaded %d aircraft", len(self._records))

    def _save(self) -> None:
        """Rewrite the backing file from the in-memory records."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding=ENCODING, newline="\n") as fh:
                for record in self._records:
                    fh.write(encode(record))
                    fh.write("\n")
        except OSError as exc:
            notify(self._observer, "persistence_failed", PersistenceError("save", self._path, exc))
            return

        LOG.info("[file_repo] Saved %d aircraft to %s", len(self._records), self._path)

    def reload(self) -> None:
        """Discard in-memory state and read the file again."""
        self._records.clear()
        self._load()

    # ── Repository contract ───────────────────────────────────────────────

    def add(self, record: AircraftRecord) -> None:
        self._records.append(record)
        self._save()

    def get_all(self) -> list[AircraftRecord]:
        return list(self._records)

    def find_by_id(self, aircraft_id: str) -> AircraftRecord | None:
        for record in self._records:
            if record.id == aircraft_id:
                return record
        return None

    def remove(self, aircraft_id: str) -> bool:
        kept = [r for r in self._records if r.id != aircraft_id]
        if len(kept) == len(self._records):
            return False
        self._records = kept
        self._save()
        return True


__all__ = ["ENCODING", "FileRepository"]
