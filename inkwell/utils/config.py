"""
Site configuration.

Loads the site's _config.yml with OmegaConf and merges it over SiteConfig
defaults. Environment-level paths come from .env via python-dotenv.

Usage:
    from inkwell.utils.config import load_site_config

    config = load_site_config(Path("blog"))
    config.posts_path  # blog/_posts
"""

import os
from dataclasses import dataclass, field, fields
from datetime import timezone, tzinfo
from pathlib import Path
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

load_dotenv()
SITE_ROOT = Path(os.getenv("INKWELL_SITE_ROOT", "."))
LOGS_PATH = Path(os.getenv("INKWELL_LOGS_PATH", "outs/logs"))

CONFIG_FILENAME = "_config.yml"


class ConfigError(ValueError):
    """Raised when the site configuration is unreadable or has invalid values."""

    def __init__(self, message: str, config_path: Optional[Path] = None):
        self.message = message
        self.config_path = config_path
        if config_path:
            message = f"{message}\nConfig: {config_path}"
        super().__init__(message)


@dataclass
class SiteConfig:
    """
    Site-wide settings.

    Attributes:
        site_root: Directory containing _config.yml and the posts directory
        title: Site title
        baseurl: Path prefix for every generated URL (e.g., "/blog")
        permalink: Named permalink style ("date", "pretty", "ordinal", "none") or a pattern
        timezone: IANA time zone applied to naive post dates
        date_format: strftime pattern for displayed dates
        posts_dir: Posts directory, relative to site_root
        output_dir: Build output directory, relative to site_root
        tags_page: Tag index page path, relative to output_dir
        future: Whether posts dated in the future are included
        extra: Remaining _config.yml keys
    """

    site_root: Path = field(default_factory=lambda: SITE_ROOT)
    title: str = ""
    baseurl: str = ""
    permalink: str = "date"
    timezone: str = "UTC"
    date_format: str = "%Y-%m-%d"
    posts_dir: str = "_posts"
    output_dir: str = "_site"
    tags_page: str = "tags/index.html"
    future: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def posts_path(self) -> Path:
        return self.site_root / self.posts_dir

    @property
    def output_path(self) -> Path:
        return self.site_root / self.output_dir

    @property
    def tags_page_path(self) -> Path:
        return self.output_path / self.tags_page

    @property
    def tzinfo(self) -> tzinfo:
        return resolve_timezone(self.timezone)


def resolve_timezone(name: Any) -> tzinfo:
    """
    Resolve an IANA time zone name.

    Raises:
        ConfigError: If the zone is unknown
    """
    name = "" if name is None else str(name)
    if not name or name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigError(f"Unknown timezone '{name}'") from e


TRUE_STRINGS = ("true", "yes", "on", "1")
FALSE_STRINGS = ("false", "no", "off", "0", "")


def coerce_bool(value: Any, default: bool) -> bool:
    """
    Interpret a YAML value as a boolean.

    Quoted strings such as "false" or "yes" are accepted alongside real booleans.

    Raises:
        ValueError: If a string is not a recognized boolean
    """
    if value is None:
        return default
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_STRINGS:
            return True
        if text in FALSE_STRINGS:
            return False
        raise ValueError(f"'{value}' is not a boolean")
    return bool(value)


def _coerce_fields(values: Dict[str, Any], config_path: Path) -> Dict[str, Any]:
    """Check and coerce known field values to the SiteConfig types."""
    coerced: Dict[str, Any] = {}
    for f in fields(SiteConfig):
        if f.name not in values:
            continue
        value = values[f.name]
        if f.type is bool:
            try:
                coerced[f.name] = coerce_bool(value, f.default)
            except ValueError as e:
                raise ConfigError(f"Invalid value for '{f.name}': {e}", config_path) from e
        elif value is None:
            coerced[f.name] = ""
        elif isinstance(value, (str, int, float)) and not isinstance(value, bool):
            coerced[f.name] = str(value)
        else:
            raise ConfigError(
                f"Invalid value for '{f.name}': expected a string, got {type(value).__name__}",
                config_path,
            )
    return coerced


def load_site_config(site_root: Optional[Path] = None, **overrides) -> SiteConfig:
    """
    Load _config.yml from a site root and merge it over the defaults.

    A missing config file is not an error; defaults are used.

    Args:
        site_root: Site directory. Defaults to INKWELL_SITE_ROOT from .env
        **overrides: Field values that take precedence over the file (e.g., from CLI flags)

    Returns:
        SiteConfig

    Raises:
        ConfigError: If the file is malformed, a field has the wrong type,
            or the timezone is unknown
    """
    site_root = Path(site_root) if site_root is not None else SITE_ROOT
    config_path = site_root / CONFIG_FILENAME

    raw: Dict[str, Any] = {}
    if config_path.exists():
        try:
            loaded = OmegaConf.load(config_path)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}", config_path) from e
        if not isinstance(loaded, DictConfig):
            raise ConfigError("Top level of config must be a mapping", config_path)
        try:
            raw = OmegaConf.to_container(loaded, resolve=True)
        except OmegaConfBaseException as e:
            raise ConfigError(f"Cannot resolve config: {e}", config_path) from e

    raw.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(SiteConfig)} - {"site_root", "extra"}
    values = _coerce_fields({k: v for k, v in raw.items() if k in known}, config_path)
    extra = {k: v for k, v in raw.items() if k not in known}

    values["baseurl"] = values.get("baseurl", "").rstrip("/")

    config = SiteConfig(site_root=site_root, extra=extra, **values)

    # Validates timezone
    config.tzinfo

    return config
