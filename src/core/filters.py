"""Event filtering - Pure functions.

Filters the aggregated event list by type, minimum severity, date window
and free-text search. All functions are pure with no side effects.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Mapping

from src.core.disaster import DisasterEvent, DisasterType, SeverityLevel, parse_timestamp


_TYPE_NAMES = {t.value for t in DisasterType}
_SEVERITY_NAMES = {s.value for s in SeverityLevel}


@dataclass(frozen=True)
class FilterOptions:
    """Criteria for narrowing an event list.

    Attributes:
        types: Disaster types to keep (empty keeps every type)
        min_severity: Lowest severity to keep (None keeps every level)
        start: Keep events starting at or after this time
        end: Keep events starting at or before this time
        search: Case-insensitive text matched against title,
            description and affected countries
    """
    types: frozenset[DisasterType] = frozenset()
    min_severity: SeverityLevel | None = None
    start: datetime | None = None
    end: datetime | None = None
    search: str = ""


def matches_search(event: DisasterEvent, search: str) -> bool:
    """Check if an event's text fields contain the search term.

    Pure function.
    """
    term = search.strip().lower()
    if not term:
        return True

    if term in event.title.lower():
        return True
    if event.description and term in event.description.lower():
        return True
    return any(term in country.lower() for country in event.affected_countries)


def matches_filter(event: DisasterEvent, options: FilterOptions) -> bool:
    """Check if a single event satisfies every filter criterion.

    Pure function.
    """
    if options.types and event.type not in options.types:
        return False

    if (
        options.min_severity is not None
        and event.severity.ordinal < options.min_severity.ordinal
    ):
        return False

    if options.start is not None and event.start_date < options.start:
        return False

    if options.end is not None and event.start_date > options.end:
        return False

    return matches_search(event, options.search)


def filter_events(
    events: list[DisasterEvent],
    options: FilterOptions,
) -> list[DisasterEvent]:
    """Filter events, preserving order.

    Pure function.

    Args:
        events: Events to filter
        options: Filter criteria

    Returns:
        Events matching all criteria
    """
    return [e for e in events if matches_filter(e, options)]


def parse_filter_params(params: Mapping[str, str]) -> FilterOptions:
    """Build FilterOptions from request query parameters.

    Pure function. Recognized keys: ``types`` (comma-separated),
    ``min_severity``, ``start``, ``end`` (ISO-8601) and ``search``.
    Unknown type names are ignored; an unknown severity disables the
    severity filter.

    Args:
        params: Query parameter mapping

    Returns:
        FilterOptions for filter_events()
    """
    types = frozenset(
        DisasterType(name)
        for name in (t.strip().lower() for t in params.get("types", "").split(","))
        if name in _TYPE_NAMES
    )

    severity_name = params.get("min_severity", "").strip().lower()
    min_severity = SeverityLevel(severity_name) if severity_name in _SEVERITY_NAMES else None

    return FilterOptions(
        types=types,
        min_severity=min_severity,
        start=parse_timestamp(params.get("start")),
        end=parse_timestamp(params.get("end")),
        search=params.get("search", ""),
    )

