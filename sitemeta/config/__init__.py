"""Site configuration: the record and its YAML loader.

- `SITE_CONFIG` is the shipped record.
- YAML under configs/*.yaml may override it, with strict ${ENV_VAR} expansion.
"""

from __future__ import annotations

from sitemeta.config.loader import load_config, load_site_config, resolve_profile_configs
from sitemeta.config.model import SITE_CONFIG, SiteConfig
from sitemeta.core.errors import ConfigError

__all__ = [
    "ConfigError",
    "SITE_CONFIG",
    "SiteConfig",
    "load_config",
    "load_site_config",
    "resolve_profile_configs",
]
