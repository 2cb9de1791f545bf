from __future__ import annotations


class SiteMetaError(Exception):
    """Base exception for this project."""


class ConfigError(SiteMetaError):
    """Raised when site configuration is missing, unreadable or malformed."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.message = message
        self.path = path
