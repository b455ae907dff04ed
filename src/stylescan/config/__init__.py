"""Configuration loading, schema, and defaults."""

from stylescan.config.loader import ConfigError, load_config
from stylescan.config.schema import StyleScanConfig, Severity, severity_at_or_above

__all__ = [
    "ConfigError",
    "Severity",
    "StyleScanConfig",
    "load_config",
    "severity_at_or_above",
]
