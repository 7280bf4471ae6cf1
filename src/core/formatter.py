"""Display formatting - Pure functions.

Lookup functions mapping the closed DisasterType and SeverityLevel enums
to display descriptors, and text formatters for events and statistics.
All functions are pure with no side effects.
"""

from dataclasses import dataclass

from src.core.disaster import (
    DisasterEvent,
    DisasterStatistics,
    DisasterType,
    SeverityLevel,
)


@dataclass(frozen=True)
class TypeStyle:
    """Display descriptor for a disaster type.

    Attributes:
        label: Human-readable name
        color: Marker/chart color as hex
        emoji: Short icon for text surfaces
    """
    label: str
    color: str
    emoji: str


def get_type_style(disaster_type: DisasterType) -> TypeStyle:
    """Get the display style for a disaster type.

    Pure function.
    """
    if disaster_type is DisasterType.EARTHQUAKE:
        return TypeStyle("Earthquake", "#ef4444", "🌍")
    elif disaster_type is DisasterType.FIRE:
        return TypeStyle("Fire", "#f97316", "🔥")
    elif disaster_type is DisasterType.CYCLONE:
        return TypeStyle("Cyclone", "#3b82f6", "🌀")
    elif disaster_type is DisasterType.FLOOD:
        return TypeStyle("Flood", "#06b6d4", "🌊")
    elif disaster_type is DisasterType.VOLCANO:
        return TypeStyle("Volcano", "#dc2626", "🌋")
    elif disaster_type is DisasterType.DROUGHT:
        return TypeStyle("Drought", "#eab308", "☀️")
    elif disaster_type is DisasterType.STORM:
        return TypeStyle("Storm", "#8b5cf6", "⛈️")
    else:
        return TypeStyle("Other", "#6b7280", "⚠️")


def get_severity_color(severity: SeverityLevel) -> str:
    """Get the badge color name for a severity level.

    Pure function.
    """
    if severity is SeverityLevel.CRITICAL:
        return "danger"
    elif severity is SeverityLevel.HIGH:
        return "warning"
    elif severity is SeverityLevel.MEDIUM:
        return "primary"
    else:
        return "success"


def format_event_summary(event: DisasterEvent) -> str:
    """Format a one-line summary of an event.

    Pure function.

    Args:
        event: Event to summarize

    Returns:
        One-line summary string
    """
    style = get_type_style(event.type)
    time_str = event.start_date.strftime("%Y-%m-%d %H:%M UTC")
    summary = f"{style.emoji} [{event.severity.value.upper()}] {event.title} ({event.source}, {time_str})"
    if event.magnitude is not None:
        summary += f" M{event.magnitude:.1f}"
    return summary


def format_event_popup(event: DisasterEvent) -> str:
    """Format the multi-line detail block shown for a map marker.

    Pure function.
    """
    style = get_type_style(event.type)
    lines = [
        event.title,
        f"Type: {style.label}",
        f"Severity: {event.severity.value}",
    ]

    if event.magnitude is not None:
        lines.append(f"Magnitude: {event.magnitude:.1f}")

    lines.append(f"Date: {event.start_date.strftime('%Y-%m-%d %H:%M UTC')}")
    lines.append(f"Status: {event.status}")
    lines.append(f"Source: {event.source}")

    if event.affected_countries:
        lines.append(f"Countries: {', '.join(event.affected_countries)}")
    if event.source_url:
        lines.append(f"More info: {event.source_url}")

    return "\n".join(lines)


def format_statistics_label(
    disaster_type: DisasterType,
    stats: DisasterStatistics,
) -> str:
    """Format a chart tooltip for one disaster type, e.g. "Flood: 3 (25%)".

    Pure function.
    """
    count = stats.count(disaster_type)
    label = get_type_style(disaster_type).label
    if stats.total == 0:
        return f"{label}: 0"
    percent = round(100 * count / stats.total)
    return f"{label}: {count} ({percent}%)"
