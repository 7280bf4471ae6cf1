"""Unit tests for event filtering."""

from datetime import datetime, timedelta, timezone

from src.core.disaster import DisasterEvent, DisasterType, SeverityLevel
from src.core.filters import (
    FilterOptions,
    filter_events,
    matches_search,
    parse_filter_params,
)


BASE_TIME = datetime(2024, 3, 1, tzinfo=timezone.utc)


def make_event(event_id, disaster_type, severity, days=0, **overrides):
    fields = {
        "id": event_id,
        "type": disaster_type,
        "title": f"{disaster_type.value} {event_id}",
        "latitude": 0.0,
        "longitude": 0.0,
        "severity": severity,
        "start_date": BASE_TIME + timedelta(days=days),
        "source": "GDACS",
    }
    fields.update(overrides)
    return DisasterEvent(**fields)


EVENTS = [
    make_event("1", DisasterType.EARTHQUAKE, SeverityLevel.CRITICAL, days=0),
    make_event("2", DisasterType.FLOOD, SeverityLevel.MEDIUM, days=1,
               affected_countries=("Bangladesh",)),
    make_event("3", DisasterType.FIRE, SeverityLevel.LOW, days=2,
               description="Bushfire near Sydney"),
    make_event("4", DisasterType.EARTHQUAKE, SeverityLevel.HIGH, days=3),
]


def ids(events):
    return [e.id for e in events]


class TestFilterEvents:
    """Tests for filter_events()."""

    def test_default_options_keep_everything(self):
        assert filter_events(EVENTS, FilterOptions()) == EVENTS

    def test_by_type(self):
        options = FilterOptions(types=frozenset({DisasterType.EARTHQUAKE, DisasterType.FIRE}))
        assert ids(filter_events(EVENTS, options)) == ["1", "3", "4"]

    def test_by_min_severity(self):
        options = FilterOptions(min_severity=SeverityLevel.HIGH)
        assert ids(filter_events(EVENTS, options)) == ["1", "4"]

    def test_min_severity_low_keeps_all(self):
        options = FilterOptions(min_severity=SeverityLevel.LOW)
        assert len(filter_events(EVENTS, options)) == 4

    def test_by_date_window(self):
        options = FilterOptions(start=BASE_TIME + timedelta(days=1), end=BASE_TIME + timedelta(days=2))
        assert ids(filter_events(EVENTS, options)) == ["2", "3"]

    def test_search_countries(self):
        assert ids(filter_events(EVENTS, FilterOptions(search="bangla"))) == ["2"]

    def test_search_description(self):
        assert ids(filter_events(EVENTS, FilterOptions(search="SYDNEY"))) == ["3"]

    def test_combined(self):
        options = FilterOptions(
            types=frozenset({DisasterType.EARTHQUAKE}),
            min_severity=SeverityLevel.CRITICAL,
        )
        assert ids(filter_events(EVENTS, options)) == ["1"]


class TestMatchesSearch:
    """Tests for matches_search()."""

    def test_blank_matches(self):
        assert matches_search(EVENTS[0], "   ")

    def test_title(self):
        assert matches_search(EVENTS[0], "earthquake")

    def test_no_match(self):
        assert not matches_search(EVENTS[0], "volcano")


class TestParseFilterParams:
    """Tests for parse_filter_params()."""

    def test_empty(self):
        assert parse_filter_params({}) == FilterOptions()

    def test_types_ignore_unknown(self):
        options = parse_filter_params({"types": "flood, Fire,tsunami"})
        assert options.types == frozenset({DisasterType.FLOOD, DisasterType.FIRE})

    def test_severity(self):
        assert parse_filter_params({"min_severity": "High"}).min_severity == SeverityLevel.HIGH

    def test_unknown_severity_disables_filter(self):
        assert parse_filter_params({"min_severity": "all"}).min_severity is None

    def test_dates_and_search(self):
        options = parse_filter_params({
            "start": "2024-03-01T00:00:00Z",
            "end": "garbage",
            "search": "chile",
        })
        assert options.start == BASE_TIME
        assert options.end is None
        assert options.search == "chile"
