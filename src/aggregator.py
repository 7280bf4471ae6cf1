"""Aggregator - Wires Functional Core and Imperative Shell.

This module fans out to every enabled feed client concurrently, then runs
the pure core steps over the joined result: concatenate in fixed source
order, remove cross-source duplicates, sort newest first.
"""

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from src.core.config import (
    SOURCE_EONET,
    SOURCE_FIRMS,
    SOURCE_GDACS,
    SOURCE_USGS,
    Config,
)
from src.core.dedup import remove_duplicates, sort_by_start_date
from src.core.disaster import DisasterEvent
from src.shell.eonet_client import EONETClient
from src.shell.feed_client import FeedClient
from src.shell.firms_client import FIRMSClient
from src.shell.gdacs_client import GDACSClient
from src.shell.usgs_client import USGSClient


logger = logging.getLogger(__name__)


@dataclass
class AggregationSummary:
    """Counts describing one aggregated snapshot.

    Attributes:
        total: Number of events after deduplication
        by_source: Event count per source label
    """
    total: int
    by_source: dict[str, int] = field(default_factory=dict)

    @property
    def text(self) -> str:
        """Human-readable summary."""
        parts = ", ".join(f"{src}: {n}" for src, n in sorted(self.by_source.items()))
        return f"{self.total} events ({parts})" if parts else f"{self.total} events"


def summarize(events: list[DisasterEvent]) -> AggregationSummary:
    """Summarize an event list by source.

    Pure function.
    """
    return AggregationSummary(
        total=len(events),
        by_source=dict(Counter(e.source for e in events)),
    )


class Aggregator:
    """Builds one merged, de-duplicated, time-sorted disaster snapshot.

    This class wires together:
    - GDACS client (multi-hazard alerts)
    - EONET client (satellite-observed events)
    - USGS client (earthquakes)
    - Core functions (deduplication, sorting)

    The FIRMS client is only used when "firms" is listed in
    enabled_sources, and then always contributes nothing.
    """

    def __init__(
        self,
        config: Config | None = None,
        gdacs_client: FeedClient | None = None,
        eonet_client: FeedClient | None = None,
        usgs_client: FeedClient | None = None,
    ) -> None:
        """Initialize aggregator with configuration.

        Args:
            config: Application configuration (defaults used if not provided)
            gdacs_client: GDACS client (created if not provided)
            eonet_client: EONET client (created if not provided)
            usgs_client: USGS client (created if not provided)
        """
        self.config = config or Config()
        timeout = self.config.request_timeout_seconds

        self.gdacs_client = gdacs_client or GDACSClient(
            timeout=timeout,
            lookback_days=self.config.lookback_days,
            page_size=self.config.gdacs_page_size,
        )
        self.eonet_client = eonet_client or EONETClient(
            timeout=timeout,
            lookback_days=self.config.lookback_days,
        )
        self.usgs_client = usgs_client or USGSClient(
            timeout=timeout,
            min_magnitude=self.config.usgs_min_magnitude,
            lookback_days=self.config.lookback_days,
        )
        self.firms_client = FIRMSClient(map_key=self.config.firms_map_key)

    def _enabled_clients(self) -> list[FeedClient]:
        """Enabled clients, in the order their results are concatenated."""
        ordered = [
            (SOURCE_GDACS, self.gdacs_client),
            (SOURCE_EONET, self.eonet_client),
            (SOURCE_USGS, self.usgs_client),
            (SOURCE_FIRMS, self.firms_client),
        ]
        return [client for key, client in ordered if self.config.is_enabled(key)]

    def _fetch_sources(self, clients: list[FeedClient]) -> list[list[DisasterEvent]]:
        """Run every client concurrently and wait for all of them.

        Results are returned in client order regardless of finish order.
        A client that raises contributes an empty list.
        """
        if not clients:
            return []

        with ThreadPoolExecutor(
            max_workers=len(clients),
            thread_name_prefix="feed",
        ) as executor:
            futures = [executor.submit(client.fetch_events) for client in clients]

            results = []
            for client, future in zip(clients, futures):
                try:
                    results.append(future.result())
                except Exception:
                    logger.exception(
                        "Feed client %s failed",
                        getattr(client, "name", type(client).__name__),
                    )
                    results.append([])
            return results

    def fetch_all(self) -> list[DisasterEvent]:
        """Fetch, merge, de-duplicate and sort events from all sources.

        Never raises: a failing source contributes nothing, and any
        unexpected fault yields an empty list.

        Returns:
            Events sorted by start date, newest first
        """
        try:
            results = self._fetch_sources(self._enabled_clients())

            merged = [event for events in results for event in events]
            unique = remove_duplicates(merged)

            logger.info(
                "Removed %d duplicate events (of %d total)",
                len(merged) - len(unique),
                len(merged),
            )

            events = sort_by_start_date(unique)
        except Exception:
            logger.exception("Unexpected error while aggregating disaster events")
            return []

        logger.info("Aggregated %s", summarize(events).text)

        return events
