"""GDACS payload parsing - Pure functions.

This module turns GDACS event list responses into DisasterEvent objects.
GDACS serves either flat event records or GeoJSON features that carry the
same attributes under "properties"; both shapes are accepted.
"""

from typing import Any

from src.core.classify import map_gdacs_alert_level, map_gdacs_event_type
from src.core.disaster import DisasterEvent, parse_timestamp


SOURCE_LABEL = "GDACS"
ID_PREFIX = "gdacs"
DEFAULT_TITLE = "Unnamed event"


def _extract_coordinates(
    record: dict[str, Any],
    feature: dict[str, Any],
) -> tuple[float, float] | None:
    """Return (latitude, longitude), preferring explicit record fields."""
    lat = record.get("latitude")
    lon = record.get("longitude")
    if lat is not None and lon is not None:
        return float(lat), float(lon)

    # GeoJSON order is (longitude, latitude)
    coords = (feature.get("geometry") or {}).get("coordinates") or []
    if len(coords) >= 2:
        return float(coords[1]), float(coords[0])

    return None


def _parse_magnitude(value: Any) -> float | None:
    """Return the severity value as a float, or None if absent or not numeric."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def parse_gdacs_event(feature: dict[str, Any]) -> DisasterEvent | None:
    """Parse a single GDACS record into a DisasterEvent.

    Pure function: takes raw dict, returns DisasterEvent or None if invalid.

    Args:
        feature: Flat GDACS event record or GeoJSON feature

    Returns:
        DisasterEvent or None if parsing fails
    """
    try:
        record = feature.get("properties") or feature

        event_id = record.get("eventid")
        if event_id is None or event_id == "":
            return None

        coordinates = _extract_coordinates(record, feature)
        if coordinates is None:
            return None

        start_date = parse_timestamp(record.get("fromdate"))
        if start_date is None:
            return None

        magnitude = (record.get("severitydata") or {}).get("severity")
        country = record.get("country")

        return DisasterEvent(
            id=f"{ID_PREFIX}-{event_id}",
            type=map_gdacs_event_type(record.get("eventtype")),
            title=record.get("eventname") or record.get("name") or DEFAULT_TITLE,
            description=record.get("description") or record.get("htmldescription"),
            latitude=coordinates[0],
            longitude=coordinates[1],
            severity=map_gdacs_alert_level(record.get("alertlevel")),
            magnitude=_parse_magnitude(magnitude),
            start_date=start_date,
            end_date=parse_timestamp(record.get("todate")),
            source=SOURCE_LABEL,
            source_url=(record.get("url") or {}).get("report"),
            affected_countries=(country,) if country else (),
        )
    except (AttributeError, KeyError, TypeError, ValueError):
        return None


def parse_gdacs_events(payload: dict[str, Any]) -> list[DisasterEvent]:
    """Parse a GDACS event list response.

    Pure function: invalid records are dropped, upstream order is kept.

    Args:
        payload: Decoded JSON body with a "features" list

    Returns:
        List of valid DisasterEvent objects
    """
    features = payload.get("features")
    if not isinstance(features, list):
        return []

    events = []

    for feature in features:
        if not isinstance(feature, dict):
            continue
        event = parse_gdacs_event(feature)
        if event is not None:
            events.append(event)

    return events
