"""Disaster API - FastAPI service for the disaster map frontend.

Serves the merged GDACS / NASA EONET / USGS snapshot, optionally filtered,
together with per-type statistics. Upstream failures never surface as
errors: the event list is simply shorter or empty.
"""

import logging
import os
from datetime import datetime, timezone

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from src.aggregator import Aggregator
from src.core.disaster import DisasterEvent, compute_statistics
from src.core.filters import filter_events, parse_filter_params
from src.core.formatter import format_event_popup, get_severity_color, get_type_style
from src.shell.config_loader import load_config, load_config_from_env

logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Disaster API",
    description="Natural disaster events aggregated from GDACS, NASA EONET and USGS",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get(
        "CORS_ORIGINS", "http://localhost:3000,http://localhost:3001"
    ).split(","),
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)


# ===== Response Models =====

class EventResponse(BaseModel):
    id: str
    type: str
    title: str
    description: str | None = None
    latitude: float
    longitude: float
    severity: str
    magnitude: float | None = None
    startDate: datetime
    endDate: datetime | None = None
    source: str
    sourceUrl: str | None = None
    affectedCountries: list[str] = []
    status: str
    typeLabel: str
    color: str
    severityColor: str
    popup: str


class StatisticsResponse(BaseModel):
    earthquake: int = 0
    fire: int = 0
    cyclone: int = 0
    flood: int = 0
    volcano: int = 0
    drought: int = 0
    storm: int = 0
    other: int = 0
    total: int = 0


class EventsResponse(BaseModel):
    events: list[EventResponse]
    count: int
    fetched_at: datetime


# ===== Helpers =====

def _event_payload(event: DisasterEvent) -> dict:
    """Event JSON plus the display fields used by the map frontend."""
    style = get_type_style(event.type)
    return {
        **event.to_dict(),
        "typeLabel": style.label,
        "color": style.color,
        "severityColor": get_severity_color(event.severity),
        "popup": format_event_popup(event),
    }


def _get_aggregator() -> Aggregator:
    """Build an aggregator from CONFIG_PATH or the environment."""
    config_path = os.environ.get("CONFIG_PATH")
    config = load_config(config_path) if config_path else load_config_from_env()
    return Aggregator(config)


def _fetch_filtered(
    types: str,
    min_severity: str,
    search: str,
    start: str,
    end: str,
) -> list[DisasterEvent]:
    params = {
        "types": types,
        "min_severity": min_severity,
        "search": search,
        "start": start,
        "end": end,
    }
    events = _get_aggregator().fetch_all()
    return filter_events(events, parse_filter_params(params))


# ===== Public Endpoints =====

@app.get("/events", response_model=EventsResponse)
def get_events(
    types: str = Query(default="", description="Comma-separated disaster types"),
    min_severity: str = Query(default="", description="low, medium, high or critical"),
    search: str = Query(default="", description="Matches title, description, countries"),
    start: str = Query(default="", description="ISO-8601 lower bound on start date"),
    end: str = Query(default="", description="ISO-8601 upper bound on start date"),
):
    """Get the merged event list, newest first."""
    events = _fetch_filtered(types, min_severity, search, start, end)

    return {
        "events": [_event_payload(e) for e in events],
        "count": len(events),
        "fetched_at": datetime.now(timezone.utc),
    }


@app.get("/statistics", response_model=StatisticsResponse)
def get_statistics(
    types: str = Query(default=""),
    min_severity: str = Query(default=""),
    search: str = Query(default=""),
    start: str = Query(default=""),
    end: str = Query(default=""),
):
    """Get event counts per disaster type for the filtered list."""
    events = _fetch_filtered(types, min_severity, search, start, end)
    return compute_statistics(events).to_dict()


@app.get("/health")
def health_check():
    """Health check endpoint for Cloud Run."""
    return {"status": "healthy"}
