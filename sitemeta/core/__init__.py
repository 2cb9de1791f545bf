"""Project core.

Non-domain building blocks shared by the config layer and the CLI.
"""

from __future__ import annotations

from .errors import ConfigError, SiteMetaError

__all__ = ["ConfigError", "SiteMetaError"]
