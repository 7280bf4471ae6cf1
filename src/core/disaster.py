"""Disaster event data model - Pure data structures.

This module defines the unified schema that every upstream feed is
normalized into. All functions are pure with no side effects.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable


class DisasterType(str, Enum):
    """Closed set of disaster categories."""

    EARTHQUAKE = "earthquake"
    FIRE = "fire"
    CYCLONE = "cyclone"
    FLOOD = "flood"
    VOLCANO = "volcano"
    DROUGHT = "drought"
    STORM = "storm"
    OTHER = "other"


class SeverityLevel(str, Enum):
    """Ordered severity scale: low < medium < high < critical."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def ordinal(self) -> int:
        """Rank of this level, 1 (low) to 4 (critical)."""
        return _SEVERITY_ORDINALS[self]


_SEVERITY_ORDINALS = {
    SeverityLevel.LOW: 1,
    SeverityLevel.MEDIUM: 2,
    SeverityLevel.HIGH: 3,
    SeverityLevel.CRITICAL: 4,
}


@dataclass(frozen=True)
class DisasterEvent:
    """Immutable, source-independent disaster event.

    Attributes:
        id: Globally unique ID, "<source-prefix>-<native-id>"
        type: Disaster category
        title: Short human-readable label
        latitude: WGS84 latitude
        longitude: WGS84 longitude
        severity: Severity level
        start_date: Event onset (timezone-aware UTC)
        source: Provenance label ("GDACS", "NASA EONET", "USGS")
        description: Optional free text
        magnitude: Optional numeric intensity
        end_date: Closure time; None while the event is active
        source_url: Optional link to the upstream report
        affected_countries: Country names or codes, in upstream order
    """
    id: str
    type: DisasterType
    title: str
    latitude: float
    longitude: float
    severity: SeverityLevel
    start_date: datetime
    source: str
    description: str | None = None
    magnitude: float | None = None
    end_date: datetime | None = None
    source_url: str | None = None
    affected_countries: tuple[str, ...] = ()

    @property
    def status(self) -> str:
        """'closed' if the event has an end date, else 'active'."""
        return "closed" if self.end_date is not None else "active"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON shape consumed by the presentation layer."""
        return {
            "id": self.id,
            "type": self.type.value,
            "title": self.title,
            "description": self.description,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "severity": self.severity.value,
            "magnitude": self.magnitude,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat() if self.end_date else None,
            "source": self.source,
            "sourceUrl": self.source_url,
            "affectedCountries": list(self.affected_countries),
            "status": self.status,
        }


@dataclass
class DisasterStatistics:
    """Event counts per disaster type.

    Every DisasterType has a counter, so the counters always sum to total.
    """
    counts: dict[DisasterType, int] = field(
        default_factory=lambda: {t: 0 for t in DisasterType}
    )
    total: int = 0

    def count(self, disaster_type: DisasterType) -> int:
        return self.counts.get(disaster_type, 0)

    def to_dict(self) -> dict[str, int]:
        result = {t.value: self.counts.get(t, 0) for t in DisasterType}
        result["total"] = self.total
        return result


def compute_statistics(events: Iterable[DisasterEvent]) -> DisasterStatistics:
    """Count events per disaster type.

    Pure function.

    Args:
        events: Events to count

    Returns:
        DisasterStatistics with one counter per type plus total
    """
    stats = DisasterStatistics()
    for event in events:
        stats.counts[event.type] += 1
        stats.total += 1
    return stats


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp into a timezone-aware UTC datetime.

    Pure function. Timestamps without an offset are taken as UTC.

    Returns:
        Parsed datetime, or None if value is empty or malformed
    """
    if not value:
        return None

    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
