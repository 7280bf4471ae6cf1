"""Tests for the FastAPI service."""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from api.main import app
from src.core.disaster import DisasterEvent, DisasterType, SeverityLevel


EVENTS = [
    DisasterEvent(
        id="usgs-1",
        type=DisasterType.EARTHQUAKE,
        title="M 7.1 - Vanuatu",
        latitude=-17.7,
        longitude=168.3,
        severity=SeverityLevel.CRITICAL,
        start_date=datetime(2024, 3, 2, tzinfo=timezone.utc),
        source="USGS",
        magnitude=7.1,
    ),
    DisasterEvent(
        id="eonet-1",
        type=DisasterType.FIRE,
        title="Wildfire, Chile",
        latitude=-36.8,
        longitude=-73.0,
        severity=SeverityLevel.MEDIUM,
        start_date=datetime(2024, 3, 1, tzinfo=timezone.utc),
        source="NASA EONET",
        affected_countries=("Chile",),
    ),
]


@pytest.fixture
def client():
    with patch("api.main._get_aggregator") as mock_get:
        mock_get.return_value.fetch_all.return_value = EVENTS
        yield TestClient(app)


class TestEventsEndpoint:
    """Tests for GET /events."""

    def test_returns_all_events(self, client):
        response = client.get("/events")

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 2
        assert [e["id"] for e in body["events"]] == ["usgs-1", "eonet-1"]
        assert body["events"][0]["magnitude"] == 7.1

    def test_includes_display_fields(self, client):
        quake, fire = client.get("/events").json()["events"]

        assert quake["typeLabel"] == "Earthquake"
        assert quake["color"] == "#ef4444"
        assert quake["severityColor"] == "danger"
        assert quake["popup"].startswith("M 7.1 - Vanuatu\nType: Earthquake")
        assert "Magnitude: 7.1" in quake["popup"]
        assert fire["severityColor"] == "primary"
        assert "Countries: Chile" in fire["popup"]

    def test_filters_by_search(self, client):
        body = client.get("/events", params={"search": "chile"}).json()
        assert [e["id"] for e in body["events"]] == ["eonet-1"]

    def test_filters_by_severity(self, client):
        body = client.get("/events", params={"min_severity": "critical"}).json()
        assert body["count"] == 1


class TestStatisticsEndpoint:
    """Tests for GET /statistics."""

    def test_counts(self, client):
        body = client.get("/statistics").json()

        assert body["earthquake"] == 1
        assert body["fire"] == 1
        assert body["other"] == 0
        assert body["total"] == 2


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
