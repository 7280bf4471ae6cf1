"""Type and severity classifiers - Pure functions.

Translates the vocabulary of each upstream feed (GDACS event codes and
alert colors, EONET category titles, USGS magnitudes) into the unified
DisasterType and SeverityLevel enums. Every function is total: any
unrecognized input lands on an explicit default.
"""

from src.core.disaster import DisasterType, SeverityLevel


GDACS_EVENT_TYPES: dict[str, DisasterType] = {
    "EQ": DisasterType.EARTHQUAKE,
    "TC": DisasterType.CYCLONE,
    "FL": DisasterType.FLOOD,
    "VO": DisasterType.VOLCANO,
    "WF": DisasterType.FIRE,
    "DR": DisasterType.DROUGHT,
}

GDACS_ALERT_LEVELS: dict[str, SeverityLevel] = {
    "red": SeverityLevel.CRITICAL,
    "orange": SeverityLevel.HIGH,
    "green": SeverityLevel.MEDIUM,
}

# Checked in order; first match wins.
EONET_CATEGORY_KEYWORDS: tuple[tuple[tuple[str, ...], DisasterType], ...] = (
    (("wildfire", "fire"), DisasterType.FIRE),
    (("storm", "cyclone", "hurricane"), DisasterType.CYCLONE),
    (("flood",), DisasterType.FLOOD),
    (("volcano",), DisasterType.VOLCANO),
    (("drought",), DisasterType.DROUGHT),
)

# Fallback for EONET categories that match no keyword. This differs from
# the OTHER sentinel used by GDACS; see DESIGN.md.
EONET_CATEGORY_FALLBACK = DisasterType.STORM


def map_gdacs_event_type(event_type: str | None) -> DisasterType:
    """Map a GDACS event type code (e.g. 'EQ') to a DisasterType.

    Pure function. Unknown or missing codes map to OTHER.
    """
    if not event_type:
        return DisasterType.OTHER
    return GDACS_EVENT_TYPES.get(event_type.strip().upper(), DisasterType.OTHER)


def map_gdacs_alert_level(alert_level: str | None) -> SeverityLevel:
    """Map a GDACS traffic-light alert level to a SeverityLevel.

    Pure function. Case-insensitive; anything unrecognized maps to LOW.
    """
    if not alert_level:
        return SeverityLevel.LOW
    return GDACS_ALERT_LEVELS.get(alert_level.strip().lower(), SeverityLevel.LOW)


def map_eonet_category(category_title: str | None) -> DisasterType:
    """Map an EONET category title to a DisasterType.

    Pure function. Case-insensitive substring match in priority order,
    falling back to EONET_CATEGORY_FALLBACK.

    Args:
        category_title: Title of the event's first category

    Returns:
        Matching DisasterType
    """
    title = (category_title or "").lower()

    for keywords, disaster_type in EONET_CATEGORY_KEYWORDS:
        if any(keyword in title for keyword in keywords):
            return disaster_type

    return EONET_CATEGORY_FALLBACK


def severity_from_magnitude(magnitude: float | None) -> SeverityLevel:
    """Derive earthquake severity from magnitude.

    Pure function.
    """
    if magnitude is None:
        return SeverityLevel.LOW
    if magnitude >= 7.0:
        return SeverityLevel.CRITICAL
    elif magnitude >= 6.0:
        return SeverityLevel.HIGH
    elif magnitude >= 5.0:
        return SeverityLevel.MEDIUM
    else:
        return SeverityLevel.LOW
