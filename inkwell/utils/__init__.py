"""
Shared utilities for Inkwell.

Common functionality used across contexts:
- Site configuration
- Logging setup
- Timestamp formatting
"""

from inkwell.utils.config import ConfigError, SiteConfig, load_site_config
from inkwell.utils.timestamp import format_display_date, now, to_iso8601

__all__ = [
    "ConfigError",
    "SiteConfig",
    "load_site_config",
    "format_display_date",
    "now",
    "to_iso8601",
]
