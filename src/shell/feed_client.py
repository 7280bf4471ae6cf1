"""Shared HTTP behaviour for upstream feed clients - Imperative Shell.

Every feed client performs one GET, decodes JSON and hands the body to a
pure parser from the core. fetch_events() is the adapter boundary: it
never raises, turning any transport, status or payload problem into an
empty result so one failing feed cannot abort aggregation.
"""

import logging
from typing import Any

import requests

from src.core.disaster import DisasterEvent


logger = logging.getLogger(__name__)


# Default timeout for API requests (seconds)
DEFAULT_TIMEOUT = 30


class FeedClient:
    """Base class for clients of a single upstream disaster feed.

    Subclasses set ``name`` and implement fetch_raw() and parse().
    """

    name = "feed"

    def __init__(self, base_url: str, timeout: int = DEFAULT_TIMEOUT) -> None:
        """Initialize feed client.

        Args:
            base_url: Endpoint URL
            timeout: Request timeout in seconds
        """
        self.base_url = base_url
        self.timeout = timeout

    def _get_json(
        self,
        params: dict[str, str],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """GET the endpoint and decode the JSON body.

        Raises:
            requests.RequestException: If the request fails or returns
                a non-success status
            ValueError: If the body is not a JSON object
        """
        logger.info(
            "Fetching events from %s",
            self.name,
            extra={"params": params},
        )

        response = requests.get(
            self.base_url,
            params=params,
            headers=headers,
            timeout=self.timeout,
        )
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"{self.name} returned {type(data).__name__}, expected object")

        return data

    def fetch_raw(self) -> dict[str, Any]:
        """Fetch the raw response body. Raises on failure."""
        raise NotImplementedError

    def parse(self, payload: dict[str, Any]) -> list[DisasterEvent]:
        """Convert a raw response body into events."""
        raise NotImplementedError

    def fetch_events(self) -> list[DisasterEvent]:
        """Fetch and normalize events from this feed.

        Never raises; failures are logged and yield an empty list.

        Returns:
            Normalized events in upstream order
        """
        try:
            payload = self.fetch_raw()
            events = self.parse(payload)
        except requests.RequestException as e:
            logger.error("Failed to fetch %s events: %s", self.name, e)
            return []
        except ValueError as e:
            logger.error("Invalid %s response: %s", self.name, e)
            return []
        except Exception:
            logger.exception("Unexpected error handling %s response", self.name)
            return []

        logger.info("Fetched %d events from %s", len(events), self.name)

        return events
