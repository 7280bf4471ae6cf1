"""USGS API Client - Imperative Shell.

This module handles HTTP communication with the USGS Earthquake API.
All I/O is contained here; business logic is in the core module.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from src.core.disaster import DisasterEvent
from src.core.usgs import parse_usgs_features
from src.shell.feed_client import DEFAULT_TIMEOUT, FeedClient


logger = logging.getLogger(__name__)


# USGS FDSN Event Web Service base URL
USGS_API_BASE = "https://earthquake.usgs.gov/fdsnws/event/1/query"


@dataclass
class USGSQueryParams:
    """Parameters for USGS API query.

    Attributes:
        min_magnitude: Minimum magnitude to fetch
        start_time: Fetch earthquakes after this time
    """
    min_magnitude: float | None = None
    start_time: datetime | None = None


class USGSClient(FeedClient):
    """Client for fetching earthquake data from USGS API.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    name = "USGS"

    def __init__(
        self,
        base_url: str = USGS_API_BASE,
        timeout: int = DEFAULT_TIMEOUT,
        min_magnitude: float = 4.5,
        lookback_days: int = 7,
    ) -> None:
        """Initialize USGS client.

        Args:
            base_url: USGS API base URL
            timeout: Request timeout in seconds
            min_magnitude: Minimum magnitude to fetch
            lookback_days: How many days back to fetch
        """
        super().__init__(base_url, timeout)
        self.min_magnitude = min_magnitude
        self.lookback_days = lookback_days

    def _build_params(self, query: USGSQueryParams) -> dict[str, str]:
        """Build query parameters for USGS API request.

        Args:
            query: Query parameters

        Returns:
            Dict of URL query parameters
        """
        params: dict[str, str] = {
            "format": "geojson",
            "orderby": "time",
        }

        if query.min_magnitude is not None:
            params["minmagnitude"] = str(query.min_magnitude)

        if query.start_time is not None:
            params["starttime"] = query.start_time.strftime("%Y-%m-%dT%H:%M:%S")

        return params

    def _recent_query(self, now: datetime | None = None) -> USGSQueryParams:
        now = now or datetime.now(timezone.utc)
        return USGSQueryParams(
            min_magnitude=self.min_magnitude,
            start_time=now - timedelta(days=self.lookback_days),
        )

    def fetch_earthquakes(self, query: USGSQueryParams) -> dict[str, Any]:
        """Fetch earthquake data from USGS API.

        This method performs HTTP I/O.

        Args:
            query: Query parameters

        Returns:
            Raw GeoJSON response from USGS

        Raises:
            requests.RequestException: If the request fails
        """
        data = self._get_json(self._build_params(query))

        logger.debug(
            "USGS reported %d earthquakes",
            data.get("metadata", {}).get("count", 0),
        )

        return data

    def fetch_raw(self) -> dict[str, Any]:
        """Fetch earthquakes for the configured trailing window."""
        return self.fetch_earthquakes(self._recent_query())

    def parse(self, payload: dict[str, Any]) -> list[DisasterEvent]:
        return parse_usgs_features(payload)
