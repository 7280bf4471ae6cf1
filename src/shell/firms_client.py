"""NASA FIRMS fire detection client - Imperative Shell (disabled).

FIRMS requires a MAP_KEY provisioned at
https://firms.modaps.eosdis.nasa.gov/api/ which this deployment does not
have. The client keeps the integration point so a real implementation can
be dropped in; until then it always returns no events and the aggregator
does not register it by default. Wildfires still arrive through EONET.
"""

import logging
from typing import Any

from src.core.disaster import DisasterEvent
from src.shell.feed_client import DEFAULT_TIMEOUT, FeedClient


logger = logging.getLogger(__name__)


FIRMS_API_BASE = "https://firms.modaps.eosdis.nasa.gov/api/country/csv"


class FIRMSClient(FeedClient):
    """Placeholder client for NASA FIRMS active fire data."""

    name = "NASA FIRMS"

    def __init__(
        self,
        map_key: str | None = None,
        base_url: str = FIRMS_API_BASE,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        super().__init__(base_url, timeout)
        self.map_key = map_key

    def fetch_raw(self) -> dict[str, Any]:
        return {}

    def parse(self, payload: dict[str, Any]) -> list[DisasterEvent]:
        return []

    def fetch_events(self) -> list[DisasterEvent]:
        """Always returns an empty list; see module docstring."""
        if self.map_key:
            logger.warning("FIRMS MAP_KEY is set but the FIRMS adapter is not implemented")
        else:
            logger.warning("FIRMS adapter disabled: no MAP_KEY configured")
        return []
