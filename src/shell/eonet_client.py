"""NASA EONET API Client - Imperative Shell.

Fetches open natural events from the Earth Observatory Natural Event
Tracker. Parsing lives in src.core.eonet.
"""

from typing import Any

from src.core.disaster import DisasterEvent
from src.core.eonet import parse_eonet_events
from src.shell.feed_client import DEFAULT_TIMEOUT, FeedClient


EONET_API_BASE = "https://eonet.gsfc.nasa.gov/api/v3/events"


class EONETClient(FeedClient):
    """Client for the EONET v3 events endpoint."""

    name = "NASA EONET"

    def __init__(
        self,
        base_url: str = EONET_API_BASE,
        timeout: int = DEFAULT_TIMEOUT,
        lookback_days: int = 7,
    ) -> None:
        super().__init__(base_url, timeout)
        self.lookback_days = lookback_days

    def _build_params(self) -> dict[str, str]:
        return {
            "status": "open",
            "days": str(self.lookback_days),
        }

    def fetch_raw(self) -> dict[str, Any]:
        return self._get_json(self._build_params())

    def parse(self, payload: dict[str, Any]) -> list[DisasterEvent]:
        return parse_eonet_events(payload)
