"""NASA EONET payload parsing - Pure functions.

EONET tracks an event as a sequence of time-stamped geometries. Moving
events such as storms accumulate several positions; only the most recent
one is used as the event's location and start date.
"""

from typing import Any

from src.core.classify import map_eonet_category
from src.core.disaster import DisasterEvent, DisasterType, SeverityLevel, parse_timestamp


SOURCE_LABEL = "NASA EONET"
ID_PREFIX = "eonet"

# EONET carries no severity signal
DEFAULT_SEVERITY = SeverityLevel.MEDIUM


def _latest_position(geometry: dict[str, Any]) -> tuple[float, float]:
    """Return (latitude, longitude) from an EONET geometry record.

    Coordinates are either a flat [lon, lat] pair or a list of pairs
    (polygons); for the latter the first pair is used.
    """
    coords = geometry["coordinates"]
    if isinstance(coords[0], (list, tuple)):
        coords = coords[0]
        # Polygon rings nest one level deeper
        if isinstance(coords[0], (list, tuple)):
            coords = coords[0]
    return float(coords[1]), float(coords[0])


def _classify(categories: list[dict[str, Any]]) -> DisasterType:
    if not categories:
        return DisasterType.OTHER
    return map_eonet_category(categories[0].get("title"))


def parse_eonet_event(event: dict[str, Any]) -> DisasterEvent | None:
    """Parse a single EONET event into a DisasterEvent.

    Pure function.

    Args:
        event: EONET event dict

    Returns:
        DisasterEvent or None if parsing fails
    """
    try:
        geometries = event.get("geometry") or []
        if not geometries:
            return None

        latest = geometries[-1]
        latitude, longitude = _latest_position(latest)

        start_date = parse_timestamp(latest.get("date"))
        if start_date is None:
            return None

        sources = event.get("sources") or []
        source_url = event.get("link") or (sources[0].get("url") if sources else None)

        return DisasterEvent(
            id=f"{ID_PREFIX}-{event['id']}",
            type=_classify(event.get("categories") or []),
            title=event.get("title") or "",
            description=event.get("description"),
            latitude=latitude,
            longitude=longitude,
            severity=DEFAULT_SEVERITY,
            start_date=start_date,
            end_date=parse_timestamp(event.get("closed")),
            source=SOURCE_LABEL,
            source_url=source_url,
        )
    except (AttributeError, IndexError, KeyError, TypeError, ValueError):
        return None


def parse_eonet_events(payload: dict[str, Any]) -> list[DisasterEvent]:
    """Parse an EONET events response.

    Pure function: invalid events are dropped, upstream order is kept.
    """
    raw_events = payload.get("events")
    if not isinstance(raw_events, list):
        return []

    events = []
    for raw in raw_events:
        if not isinstance(raw, dict):
            continue
        event = parse_eonet_event(raw)
        if event is not None:
            events.append(event)

    return events
