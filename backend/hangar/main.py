"""
main.py – FastAPI entry point
=============================

HTTP front-end over :class:`FleetService`. Every route maps to exactly one
service operation (``/analytics`` bundles the three aggregates).

Run locally::

    uvicorn hangar.main:app --reload

Key points
----------
* The service is built once in the lifespan hook and kept on
  ``app.state.service``. Tests replace it with an in-memory one.
* Routes are ``async def``: every service call runs on the event-loop
  thread, one at a time, which is the only concurrency the storage layer
  supports.
* Domain errors map to status codes in one place (the exception handlers
  below): invalid data → 400, duplicate id → 409, unknown id → 404.
"""

from __future__ import annotations

# ─── Std-lib / third-party ────────────────────────────────────────────
import html
import logging
from contextlib import asynccontextmanager
from typing import Any, Literal

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from pydantic import BaseModel, Field

# ─── Project modules ──────────────────────────────────────────────────
from . import config
from .errors import AircraftNotFound, DuplicateIdError, InvalidAircraftData
from .models import build_record, to_dict
from .render import TABLE_HEADERS, table_row
from .service import FleetService

LOG = logging.getLogger("api")


# ---------------------------------------------------------------------
# Request schema
# ---------------------------------------------------------------------
class AircraftIn(BaseModel):
    """Body of ``POST /aircraft``.

    ``specific`` is the cabin class, the max cargo weight or the weapon
    type, depending on ``type``.
    """

    type: Literal["passenger", "cargo", "military"]
    id: str
    model: str = ""
    manufacturer: str = ""
    capacity: int
    range: float
    year: int
    flight_hours: int = 0
    status: str = ""
    specific: str | float = Field(..., description="Variant-specific value")


# ---------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    config.configure_logging()
    if getattr(app.state, "service", None) is None:
        app.state.service = config.build_service()
    LOG.info("[startup] Fleet API ready (%d aircraft)", len(app.state.service.get_all_aircraft()))
    yield


# ---------------------------------------------------------------------
# FastAPI instance & middleware
# ---------------------------------------------------------------------
app = FastAPI(title="Hangar fleet registry", lifespan=lifespan)
app.state.service = None

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


def _service(request: Request) -> FleetService:
    service = request.app.state.service
    if service is None:
        raise HTTPException(status_code=503, detail="Service not initialised")
    return service


@app.exception_handler(InvalidAircraftData)
async def invalid_data_handler(request: Request, exc: InvalidAircraftData):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(DuplicateIdError)
async def duplicate_id_handler(request: Request, exc: DuplicateIdError):
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(AircraftNotFound)
async def not_found_handler(request: Request, exc: AircraftNotFound):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


# Health probe --------------------------------------------------------
@app.get("/healthz", response_class=PlainTextResponse)
async def healthz() -> PlainTextResponse:
    """Return HTTP 200 with body “ok” if the app is up."""
    return PlainTextResponse("ok", status_code=200)


# ---------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------
@app.get("/aircraft")
async def list_aircraft(request: Request) -> list[dict[str, Any]]:
    """Every aircraft in storage order."""
    return [to_dict(r) for r in _service(request).get_all_aircraft()]


@app.get("/aircraft/{aircraft_id}")
async def get_aircraft(aircraft_id: str, request: Request) -> dict[str, Any]:
    """One aircraft, 404 if unknown."""
    return to_dict(_service(request).find_aircraft(aircraft_id))


@app.post("/aircraft", status_code=201)
async def add_aircraft(body: AircraftIn, request: Request) -> dict[str, Any]:
    """Validate and store a new aircraft.

    Raises:
        400: Blank id, negative capacity/range or a non-numeric cargo weight.
        409: Id already in use.
    """
    try:
        record = build_record(
            body.type,
            body.specific,
            id=body.id,
            model=body.model,
            manufacturer=body.manufacturer,
            capacity=body.capacity,
            range=body.range,
            year=body.year,
            flight_hours=body.flight_hours,
            status=body.status,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    _service(request).add_aircraft(record)
    return to_dict(record)


@app.delete("/aircraft/{aircraft_id}")
async def delete_aircraft(aircraft_id: str, request: Request) -> dict[str, Any]:
    """Remove an aircraft, 404 if unknown."""
    removed = _service(request).remove_aircraft(aircraft_id)
    return {"ok": True, "removed": removed}


@app.get("/analytics")
async def analytics(request: Request) -> dict[str, Any]:
    """Average capacity, longest-range aircraft and oldest aircraft."""
    service = _service(request)
    longest = service.max_range_aircraft()
    oldest = service.oldest_aircraft()
    return {
        "average_capacity": service.average_capacity(),
        "max_range": to_dict(longest) if longest else None,
        "oldest": to_dict(oldest) if oldest else None,
    }


@app.get("/fleet", response_class=HTMLResponse)
async def fleet_table(request: Request) -> HTMLResponse:
    """Human-readable table of the whole fleet."""
    records = _service(request).get_all_aircraft()

    head = "".join(f"<th>{h}</th>" for h in TABLE_HEADERS)
    rows = [
        "<tr>" + "".join(f"<td>{html.escape(cell)}</td>" for cell in table_row(r)) + "</tr>"
        for r in records
    ]
    empty = f"<tr><td colspan='{len(TABLE_HEADERS)}'>No aircraft yet</td></tr>"

    page = f"""<!doctype html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>Fleet</title>
    <style>
        body {{ font-family: system-ui, sans-serif; padding: 1rem; }}
        table {{ border-collapse: collapse; width: 100%; }}
        th, td {{ border: 1px solid #ddd; padding: 0.5rem; text-align: left; }}
        th {{ background: #f4f4f4; }}
    </style>
</head>
<body>
    <h1>Fleet</h1>
    <p><strong>Aircraft:</strong> {len(records)}</p>
    <table>
        <thead><tr>{head}</tr></thead>
        <tbody>
            {"".join(rows) if rows else empty}
        </tbody>
    </table>
    <p><a href="/aircraft">View as JSON</a> | <a href="/analytics">Analytics</a></p>
</body>
</html>"""

    return HTMLResponse(page)


def run() -> None:
    """Console-script entry point: serve the API with uvicorn."""
    uvicorn.run("hangar.main:app", host="127.0.0.1", port=8000)
