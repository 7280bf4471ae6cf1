"""GDACS API Client - Imperative Shell.

Fetches the Global Disaster Alert and Coordination System event list.
All I/O is contained here; parsing lives in src.core.gdacs.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from src.core.classify import GDACS_EVENT_TYPES
from src.core.disaster import DisasterEvent
from src.core.gdacs import parse_gdacs_events
from src.shell.feed_client import DEFAULT_TIMEOUT, FeedClient


logger = logging.getLogger(__name__)


GDACS_API_BASE = "https://www.gdacs.org/gdacsapi/api/events/geteventlist/SEARCH"

# Alert levels requested from GDACS
GDACS_ALERT_LEVELS = ("orange", "red", "green")


class GDACSClient(FeedClient):
    """Client for the GDACS event list endpoint."""

    name = "GDACS"

    def __init__(
        self,
        base_url: str = GDACS_API_BASE,
        timeout: int = DEFAULT_TIMEOUT,
        lookback_days: int = 7,
        page_size: int = 100,
    ) -> None:
        super().__init__(base_url, timeout)
        self.lookback_days = lookback_days
        self.page_size = page_size

    def _build_params(self, now: datetime | None = None) -> dict[str, str]:
        """Build query parameters for the trailing date window.

        Args:
            now: Reference time (defaults to current UTC time)

        Returns:
            Dict of URL query parameters
        """
        now = now or datetime.now(timezone.utc)
        from_date = now - timedelta(days=self.lookback_days)

        return {
            "eventlist": ";".join(GDACS_EVENT_TYPES),
            "fromdate": from_date.strftime("%Y-%m-%d"),
            "todate": now.strftime("%Y-%m-%d"),
            "alertlevel": ";".join(GDACS_ALERT_LEVELS),
            "pagesize": str(self.page_size),
        }

    def fetch_raw(self) -> dict[str, Any]:
        """Fetch the raw GDACS event list. Raises on failure."""
        return self._get_json(
            self._build_params(),
            headers={"Accept": "application/json"},
        )

    def parse(self, payload: dict[str, Any]) -> list[DisasterEvent]:
        return parse_gdacs_events(payload)
