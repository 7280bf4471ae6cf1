"""Cloud Function Entry Point - Root Module.

This is the root-level entry point for Google Cloud Functions.
It imports from the src package.
"""

from src.main import (
    disaster_events,
    disaster_events_pubsub,
)

__all__ = [
    "disaster_events",
    "disaster_events_pubsub",
]
