"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- GDACS alert feed client (HTTP)
- NASA EONET event feed client (HTTP)
- USGS earthquake catalog client (HTTP)
- NASA FIRMS fire feed client (disabled placeholder)
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from src.shell.gdacs_client import GDACSClient
from src.shell.eonet_client import EONETClient
from src.shell.usgs_client import USGSClient
from src.shell.firms_client import FIRMSClient
from src.shell.config_loader import load_config, Config

__all__ = [
    "GDACSClient",
    "EONETClient",
    "USGSClient",
    "FIRMSClient",
    "load_config",
    "Config",
]
