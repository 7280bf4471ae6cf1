"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

The Config model is defined in src/core/config.py.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from src.core.config import DEFAULT_SOURCES, Config, validate_config


logger = logging.getLogger(__name__)


def _resolve_value(value: Any) -> Any:
    """Resolve a ${VAR} environment placeholder.

    Non-string values and plain strings are returned unchanged; an unset
    variable leaves the placeholder in place.
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _parse_sources(value: Any) -> list[str]:
    """Parse enabled sources from a list or comma-separated string."""
    if value is None:
        return list(DEFAULT_SOURCES)
    if isinstance(value, str):
        value = value.split(",")
    return [str(s).strip().lower() for s in value if str(s).strip()]


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    firms_map_key = _resolve_value(data.get("firms_map_key"))
    if isinstance(firms_map_key, str) and firms_map_key.startswith("${"):
        firms_map_key = None

    config = Config(
        lookback_days=int(data.get("lookback_days", 7)),
        usgs_min_magnitude=float(data.get("usgs_min_magnitude", 4.5)),
        gdacs_page_size=int(data.get("gdacs_page_size", 100)),
        request_timeout_seconds=int(data.get("request_timeout_seconds", 30)),
        enabled_sources=_parse_sources(data.get("enabled_sources")),
        firms_map_key=firms_map_key,
    )

    result = validate_config(config)
    for warning in result.warnings:
        logger.warning("Config %s: %s", warning.field, warning.message)
    if not result.valid:
        messages = "; ".join(f"{e.field}: {e.message}" for e in result.critical_errors)
        raise ValueError(f"Invalid configuration: {messages}")

    return config


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        ValueError: If the configuration is invalid
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: %d sources, %d day window",
        len(config.enabled_sources),
        config.lookback_days,
    )

    return config


def load_config_from_env() -> Config:
    """Load configuration from environment variables.

    Useful for simple deployments without a YAML file.

    Environment variables:
        LOOKBACK_DAYS: Trailing window in days
        USGS_MIN_MAGNITUDE: Minimum magnitude requested from USGS
        GDACS_PAGE_SIZE: GDACS page size cap
        REQUEST_TIMEOUT: HTTP timeout in seconds
        ENABLED_SOURCES: Comma-separated source keys (gdacs,eonet,usgs)
        FIRMS_MAP_KEY: NASA FIRMS credential

    Returns:
        Config object from environment
    """
    data: dict[str, Any] = {
        "lookback_days": os.environ.get("LOOKBACK_DAYS", "7"),
        "usgs_min_magnitude": os.environ.get("USGS_MIN_MAGNITUDE", "4.5"),
        "gdacs_page_size": os.environ.get("GDACS_PAGE_SIZE", "100"),
        "request_timeout_seconds": os.environ.get("REQUEST_TIMEOUT", "30"),
        "enabled_sources": os.environ.get("ENABLED_SOURCES"),
        "firms_map_key": os.environ.get("FIRMS_MAP_KEY"),
    }
    return load_config_from_dict(data)
