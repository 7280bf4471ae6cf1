"""Unit tests for geographic calculations.

Pure function tests - no mocks needed, fast execution.
"""

from datetime import datetime, timezone

import pytest

from src.core.disaster import DisasterEvent, DisasterType, SeverityLevel
from src.core.geo import calculate_distance, distance_between


def make_event(lat, lon):
    return DisasterEvent(
        id="test",
        type=DisasterType.FLOOD,
        title="Test",
        latitude=lat,
        longitude=lon,
        severity=SeverityLevel.LOW,
        start_date=datetime.now(timezone.utc),
        source="GDACS",
    )


class TestCalculateDistance:
    """Tests for calculate_distance() Haversine implementation."""

    def test_same_point_returns_zero(self):
        """Distance from point to itself should be zero."""
        distance = calculate_distance(37.7749, -122.4194, 37.7749, -122.4194)
        assert distance == pytest.approx(0.0, abs=0.001)

    def test_one_degree_of_longitude_at_equator(self):
        """(0,0) to (0,1) should be about 111.2 km."""
        assert calculate_distance(0, 0, 0, 1) == pytest.approx(111.2, abs=1.0)

    def test_known_distance_sf_to_la(self):
        """SF to LA should be approximately 559 km."""
        distance = calculate_distance(37.7749, -122.4194, 34.0522, -118.2437)
        assert distance == pytest.approx(559, rel=0.02)

    def test_symmetric(self):
        """Distance should be the same in both directions."""
        d1 = calculate_distance(37.7749, -122.4194, 34.0522, -118.2437)
        d2 = calculate_distance(34.0522, -118.2437, 37.7749, -122.4194)

        assert d1 == pytest.approx(d2, rel=0.001)

    def test_across_antimeridian(self):
        """Points either side of 180° are close, not half a world apart."""
        assert calculate_distance(0, 179.9, 0, -179.9) == pytest.approx(22.2, abs=0.5)


class TestEventDistance:
    """Tests for event-based helpers."""

    def test_distance_between_events(self):
        assert distance_between(make_event(0, 0), make_event(0, 1)) == pytest.approx(111.2, abs=1.0)
