"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field


# Source keys, in the order their results are concatenated
SOURCE_GDACS = "gdacs"
SOURCE_EONET = "eonet"
SOURCE_USGS = "usgs"
SOURCE_FIRMS = "firms"

DEFAULT_SOURCES = (SOURCE_GDACS, SOURCE_EONET, SOURCE_USGS)
KNOWN_SOURCES = DEFAULT_SOURCES + (SOURCE_FIRMS,)


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        lookback_days: Trailing window fetched from every source
        usgs_min_magnitude: Minimum magnitude requested from USGS
        gdacs_page_size: Maximum number of GDACS events per request
        request_timeout_seconds: HTTP timeout for each upstream request
        enabled_sources: Source keys to aggregate
        firms_map_key: NASA FIRMS credential (the FIRMS adapter is disabled)
    """
    lookback_days: int = 7
    usgs_min_magnitude: float = 4.5
    gdacs_page_size: int = 100
    request_timeout_seconds: int = 30
    enabled_sources: list[str] = field(default_factory=lambda: list(DEFAULT_SOURCES))
    firms_map_key: str | None = None

    def is_enabled(self, source: str) -> bool:
        return source in self.enabled_sources


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_config(config: Config) -> ValidationResult:
    """Validate a configuration.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors or warnings found
    """
    errors: list[ValidationError] = []

    if config.lookback_days < 1:
        errors.append(ValidationError(
            field="lookback_days",
            message=f"lookback_days must be at least 1, got {config.lookback_days}",
        ))

    if config.gdacs_page_size < 1:
        errors.append(ValidationError(
            field="gdacs_page_size",
            message=f"gdacs_page_size must be at least 1, got {config.gdacs_page_size}",
        ))

    if config.request_timeout_seconds <= 0:
        errors.append(ValidationError(
            field="request_timeout_seconds",
            message="request_timeout_seconds must be positive",
        ))

    if config.usgs_min_magnitude < 0:
        errors.append(ValidationError(
            field="usgs_min_magnitude",
            message=f"usgs_min_magnitude {config.usgs_min_magnitude} is negative",
            severity="warning",
        ))

    for source in config.enabled_sources:
        if source not in KNOWN_SOURCES:
            errors.append(ValidationError(
                field="enabled_sources",
                message=f"Unknown source '{source}'",
            ))

    if SOURCE_FIRMS in config.enabled_sources:
        errors.append(ValidationError(
            field="enabled_sources",
            message="FIRMS adapter is disabled and always returns no events",
            severity="warning",
        ))

    if not config.enabled_sources:
        errors.append(ValidationError(
            field="enabled_sources",
            message="No sources enabled; aggregation will always be empty",
            severity="warning",
        ))

    return ValidationResult(
        valid=not any(e.severity == "error" for e in errors),
        errors=errors,
    )
