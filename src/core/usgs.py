"""USGS earthquake payload parsing - Pure functions.

This module handles parsing USGS GeoJSON data into DisasterEvent objects.
All functions are pure with no side effects.
"""

from datetime import datetime, timezone
from typing import Any

from src.core.classify import severity_from_magnitude
from src.core.disaster import DisasterEvent, DisasterType


SOURCE_LABEL = "USGS"
ID_PREFIX = "usgs"


def format_usgs_description(magnitude: float, place: str) -> str:
    """Build the "Magnitude {mag} - {place}" description line."""
    return f"Magnitude {magnitude:g} - {place}"


def parse_usgs_feature(feature: dict[str, Any]) -> DisasterEvent | None:
    """Parse a single GeoJSON feature into a DisasterEvent.

    Pure function: takes raw dict, returns DisasterEvent or None if invalid.

    Args:
        feature: GeoJSON feature dict from USGS API

    Returns:
        DisasterEvent or None if parsing fails
    """
    try:
        props = feature.get("properties", {})
        geometry = feature.get("geometry", {})
        coords = geometry.get("coordinates", [])

        if len(coords) < 2:
            return None

        # USGS uses milliseconds since epoch
        time_ms = props.get("time")
        if time_ms is None:
            return None

        event_time = datetime.fromtimestamp(time_ms / 1000, tz=timezone.utc)

        magnitude = props.get("mag")
        if magnitude is None:
            return None
        magnitude = float(magnitude)

        place = props.get("place") or "Unknown location"

        return DisasterEvent(
            id=f"{ID_PREFIX}-{feature['id']}",
            type=DisasterType.EARTHQUAKE,
            title=props.get("title") or f"M {magnitude:g} - {place}",
            description=format_usgs_description(magnitude, place),
            # GeoJSON order is (longitude, latitude, depth)
            longitude=float(coords[0]),
            latitude=float(coords[1]),
            severity=severity_from_magnitude(magnitude),
            magnitude=magnitude,
            start_date=event_time,
            source=SOURCE_LABEL,
            source_url=props.get("url"),
        )
    except (AttributeError, KeyError, TypeError, ValueError, OverflowError, OSError):
        return None


def parse_usgs_features(geojson: dict[str, Any]) -> list[DisasterEvent]:
    """Parse USGS GeoJSON response into a list of DisasterEvents.

    Pure function: filters out invalid features, keeps upstream order
    (the query asks USGS for newest first).

    Args:
        geojson: Full GeoJSON FeatureCollection from USGS API

    Returns:
        List of valid DisasterEvent objects
    """
    features = geojson.get("features", [])
    if not isinstance(features, list):
        return []

    events = []

    for feature in features:
        if not isinstance(feature, dict):
            continue
        event = parse_usgs_feature(feature)
        if event is not None:
            events.append(event)

    return events
