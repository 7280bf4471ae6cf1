"""Tests for the Aggregator module.

Tests the coordination between functional core and imperative shell.
Uses mocks for feed clients to test orchestration logic.
"""

import threading
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock, patch

import pytest

from src.aggregator import AggregationSummary, Aggregator, summarize
from src.core.config import Config
from src.core.disaster import DisasterEvent, DisasterType, SeverityLevel


BASE_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_event(event_id, source, lat=0.0, lon=0.0, hours=0.0, disaster_type=DisasterType.EARTHQUAKE):
    return DisasterEvent(
        id=event_id,
        type=disaster_type,
        title=event_id,
        latitude=lat,
        longitude=lon,
        severity=SeverityLevel.MEDIUM,
        start_date=BASE_TIME + timedelta(hours=hours),
        source=source,
    )


def mock_client(events):
    client = Mock()
    client.fetch_events.return_value = events
    return client


@pytest.fixture
def gdacs_events():
    return [
        make_event("gdacs-1", "GDACS", lat=35.0, lon=139.0, hours=1),
        make_event("gdacs-2", "GDACS", lat=-20.0, lon=150.0, hours=-10, disaster_type=DisasterType.CYCLONE),
    ]


@pytest.fixture
def eonet_events():
    return [
        make_event("eonet-1", "NASA EONET", lat=50.0, lon=-120.0, hours=5, disaster_type=DisasterType.FIRE),
    ]


@pytest.fixture
def usgs_events():
    return [
        # Same quake as gdacs-1: 5 km away, 30 minutes later
        make_event("usgs-1", "USGS", lat=35.04, lon=139.0, hours=1.5),
        make_event("usgs-2", "USGS", lat=-5.0, lon=100.0, hours=3),
    ]


@pytest.fixture
def aggregator(gdacs_events, eonet_events, usgs_events):
    return Aggregator(
        Config(),
        gdacs_client=mock_client(gdacs_events),
        eonet_client=mock_client(eonet_events),
        usgs_client=mock_client(usgs_events),
    )


class TestFetchAll:
    """Tests for Aggregator.fetch_all()."""

    def test_calls_every_source(self, aggregator):
        aggregator.fetch_all()

        aggregator.gdacs_client.fetch_events.assert_called_once()
        aggregator.eonet_client.fetch_events.assert_called_once()
        aggregator.usgs_client.fetch_events.assert_called_once()

    def test_merges_dedupes_and_sorts(self, aggregator):
        events = aggregator.fetch_all()

        assert [e.id for e in events] == ["eonet-1", "usgs-2", "gdacs-1", "gdacs-2"]

    def test_sorted_newest_first(self, aggregator):
        events = aggregator.fetch_all()

        for current, following in zip(events, events[1:]):
            assert current.start_date >= following.start_date

    def test_earlier_source_wins_duplicate(self, aggregator):
        ids = {e.id for e in aggregator.fetch_all()}

        assert "gdacs-1" in ids
        assert "usgs-1" not in ids

    def test_tie_keeps_source_order(self):
        gdacs = [make_event("gdacs-1", "GDACS", lat=0.0)]
        usgs = [make_event("usgs-1", "USGS", lat=60.0)]
        aggregator = Aggregator(
            gdacs_client=mock_client(gdacs),
            eonet_client=mock_client([]),
            usgs_client=mock_client(usgs),
        )

        assert [e.id for e in aggregator.fetch_all()] == ["gdacs-1", "usgs-1"]

    def test_all_sources_empty(self):
        aggregator = Aggregator(
            gdacs_client=mock_client([]),
            eonet_client=mock_client([]),
            usgs_client=mock_client([]),
        )
        assert aggregator.fetch_all() == []

    def test_failing_source_only_loses_its_events(self, usgs_events):
        aggregator = Aggregator(
            gdacs_client=mock_client([]),
            eonet_client=mock_client([]),
            usgs_client=mock_client(usgs_events),
        )
        assert len(aggregator.fetch_all()) == 2

    def test_raising_source_keeps_other_sources(self, eonet_events, usgs_events):
        broken = Mock()
        broken.fetch_events.side_effect = RuntimeError("bug")
        aggregator = Aggregator(
            gdacs_client=broken,
            eonet_client=mock_client(eonet_events),
            usgs_client=mock_client(usgs_events),
        )

        events = aggregator.fetch_all()

        assert [e.id for e in events] == ["eonet-1", "usgs-2", "usgs-1"]

    def test_dedup_fault_returns_empty(self, aggregator):
        with patch("src.aggregator.remove_duplicates", side_effect=TypeError("bad")):
            assert aggregator.fetch_all() == []

    def test_respects_enabled_sources(self, gdacs_events, usgs_events):
        aggregator = Aggregator(
            Config(enabled_sources=["usgs"]),
            gdacs_client=mock_client(gdacs_events),
            eonet_client=mock_client([]),
            usgs_client=mock_client(usgs_events),
        )

        events = aggregator.fetch_all()

        aggregator.gdacs_client.fetch_events.assert_not_called()
        assert {e.source for e in events} == {"USGS"}

    def test_no_sources_enabled(self, aggregator):
        aggregator.config = Config(enabled_sources=[])
        assert aggregator.fetch_all() == []

    def test_firms_contributes_nothing(self, aggregator):
        aggregator.config = Config(enabled_sources=["gdacs", "eonet", "usgs", "firms"])
        assert len(aggregator.fetch_all()) == 4

    def test_sources_run_concurrently(self):
        """Every source is in flight before any of them returns."""
        barrier = threading.Barrier(3, timeout=5)

        def waiting_client(events):
            client = Mock()

            def fetch():
                barrier.wait()
                return events

            client.fetch_events.side_effect = fetch
            return client

        aggregator = Aggregator(
            gdacs_client=waiting_client([make_event("gdacs-1", "GDACS")]),
            eonet_client=waiting_client([]),
            usgs_client=waiting_client([make_event("usgs-9", "USGS", lat=40.0)]),
        )

        assert len(aggregator.fetch_all()) == 2

    def test_builds_default_clients_from_config(self):
        aggregator = Aggregator(Config(lookback_days=3, usgs_min_magnitude=5.0, request_timeout_seconds=10))

        assert aggregator.usgs_client.min_magnitude == 5.0
        assert aggregator.usgs_client.lookback_days == 3
        assert aggregator.gdacs_client.timeout == 10
        assert aggregator.eonet_client.lookback_days == 3


class TestSummarize:
    """Tests for summarize()."""

    def test_counts_by_source(self, gdacs_events, usgs_events):
        summary = summarize(gdacs_events + usgs_events)

        assert summary.total == 4
        assert summary.by_source == {"GDACS": 2, "USGS": 2}
        assert summary.text == "4 events (GDACS: 2, USGS: 2)"

    def test_empty(self):
        assert summarize([]).text == "0 events"
        assert summarize([]) == AggregationSummary(total=0)
