"""Cloud Function Entry Point.

This module provides the entry point for Google Cloud Functions.
It's a thin wrapper that loads configuration, runs the aggregator and
returns the merged snapshot as JSON.
"""

import logging
import os
import json
from typing import Any

import functions_framework
from flask import Request

from src.aggregator import Aggregator, summarize
from src.core.config import Config
from src.core.disaster import compute_statistics
from src.core.filters import filter_events, parse_filter_params
from src.shell.config_loader import load_config, load_config_from_env


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _get_config() -> Config:
    """Load configuration from file or environment."""
    config_path = os.environ.get("CONFIG_PATH")

    if config_path:
        return load_config(config_path)
    return load_config_from_env()


def build_snapshot(
    aggregator: Aggregator,
    params: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Fetch all events, apply request filters and compute statistics.

    Args:
        aggregator: Aggregator to fetch from
        params: Optional filter query parameters

    Returns:
        JSON-serializable snapshot dict
    """
    events = aggregator.fetch_all()
    filtered = filter_events(events, parse_filter_params(params or {}))
    statistics = compute_statistics(filtered)

    return {
        "events": [e.to_dict() for e in filtered],
        "statistics": statistics.to_dict(),
        "count": len(filtered),
    }


@functions_framework.http
def disaster_events(request: Request) -> tuple[dict[str, Any], int]:
    """HTTP Cloud Function entry point.

    Returns the merged, de-duplicated, newest-first event list. Source
    failures only shrink the list; the response is still a 200.

    Args:
        request: Flask request object; query parameters are used as filters

    Returns:
        Tuple of (response dict, HTTP status code)
    """
    logger.info("Starting disaster aggregation cycle")

    try:
        config = _get_config()
        aggregator = Aggregator(config)

        response = build_snapshot(aggregator, dict(request.args))

        logger.info("Completed: %d events returned", response["count"])

        return response, 200

    except Exception as e:
        logger.exception("Unexpected error in disaster aggregation")
        return {
            "status": "error",
            "message": str(e),
        }, 500


@functions_framework.cloud_event
def disaster_events_pubsub(cloud_event: Any) -> None:
    """Pub/Sub Cloud Function entry point.

    Runs one aggregation cycle on a schedule and logs a summary, which
    is useful for monitoring upstream feed health.

    Args:
        cloud_event: CloudEvent from Pub/Sub
    """
    logger.info("Starting disaster aggregation cycle (Pub/Sub trigger)")

    config = _get_config()
    events = Aggregator(config).fetch_all()

    logger.info("Completed: %s", summarize(events).text)


# For local testing
if __name__ == "__main__":
    print("Running disaster aggregation locally...")

    class MockRequest:
        args: dict[str, str] = {}

    response, status = disaster_events(MockRequest())
    print(f"\nResponse ({status}):")
    print(json.dumps(response, indent=2, ensure_ascii=False))
