#!/usr/bin/env python3
"""Print the current aggregated disaster snapshot.

Runs one aggregation cycle against the live feeds and prints the merged,
de-duplicated event list. Useful for checking upstream feed health.

Usage:
    # Everything from the last week
    python scripts/show_events.py

    # Only high/critical earthquakes and floods
    python scripts/show_events.py --types earthquake,flood --min-severity high

    # Only one source, as JSON
    python scripts/show_events.py --sources usgs --json

    # Full detail block per event
    python scripts/show_events.py --details

Environment:
    CONFIG_PATH: Path to config file (optional)
"""

import argparse
import json
import logging
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.aggregator import Aggregator, summarize
from src.core.disaster import DisasterType, compute_statistics
from src.core.filters import filter_events, parse_filter_params
from src.core.formatter import (
    format_event_popup,
    format_event_summary,
    format_statistics_label,
)
from src.shell.config_loader import load_config, load_config_from_env

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show aggregated disaster events")
    parser.add_argument("--types", default="", help="Comma-separated disaster types")
    parser.add_argument("--min-severity", default="", help="low, medium, high or critical")
    parser.add_argument("--search", default="", help="Text to match in title/description/countries")
    parser.add_argument("--sources", default=None, help="Comma-separated sources (gdacs,eonet,usgs)")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("--details", action="store_true", help="Print the full detail block per event")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    config_path = os.environ.get("CONFIG_PATH")
    config = load_config(config_path) if config_path else load_config_from_env()
    if args.sources:
        config.enabled_sources = [s.strip().lower() for s in args.sources.split(",")]

    events = Aggregator(config).fetch_all()
    logger.info("Fetched %s", summarize(events).text)

    filtered = filter_events(events, parse_filter_params({
        "types": args.types,
        "min_severity": args.min_severity,
        "search": args.search,
    }))

    if args.json:
        print(json.dumps([e.to_dict() for e in filtered], indent=2, ensure_ascii=False))
        return 0

    for event in filtered:
        if args.details:
            print(format_event_popup(event))
            print()
        else:
            print(format_event_summary(event))

    stats = compute_statistics(filtered)
    print()
    for disaster_type in DisasterType:
        print(format_statistics_label(disaster_type, stats))
    print(f"Total: {stats.total}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
