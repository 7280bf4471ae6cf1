"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Unified disaster event model and statistics
- Type/severity classification of upstream vocabularies
- Per-source payload parsing (GDACS, EONET, USGS)
- Geo/distance calculations
- Cross-source deduplication and sorting
- Filtering and display formatting

All functions here are deterministic and have no I/O.
"""

from src.core.disaster import (
    DisasterEvent,
    DisasterStatistics,
    DisasterType,
    SeverityLevel,
    compute_statistics,
)
from src.core.classify import (
    map_eonet_category,
    map_gdacs_alert_level,
    map_gdacs_event_type,
    severity_from_magnitude,
)
from src.core.geo import calculate_distance
from src.core.dedup import remove_duplicates, sort_by_start_date
from src.core.filters import FilterOptions, filter_events

__all__ = [
    # Model
    "DisasterEvent",
    "DisasterStatistics",
    "DisasterType",
    "SeverityLevel",
    "compute_statistics",
    # Classifiers
    "map_eonet_category",
    "map_gdacs_alert_level",
    "map_gdacs_event_type",
    "severity_from_magnitude",
    # Geo
    "calculate_distance",
    # Dedup
    "remove_duplicates",
    "sort_by_start_date",
    # Filters
    "FilterOptions",
    "filter_events",
]
