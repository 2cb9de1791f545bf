from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from sitemeta.core.errors import ConfigError


def _key(name: str, *, optional: bool = False) -> dict[str, Any]:
    return {"key": name, "optional": optional}


@dataclass(frozen=True, slots=True, kw_only=True)
class SiteConfig:
    """Site metadata handed to the static-site build.

    Attributes are snake_case; each carries the camelCase key the build
    pipeline reads (see `to_dict`). Optional fields are `None` when absent.
    Values are not checked beyond being strings: hex colors, URLs and asset
    paths are taken as written.
    """

    # Prefix for all links, e.g. "/portfolio" when deployed under example.com/portfolio.
    path_prefix: str = field(metadata=_key("pathPrefix"))

    site_title: str = field(metadata=_key("siteTitle"))
    site_title_alt: str = field(metadata=_key("siteTitleAlt"))
    site_title_manifest: str = field(metadata=_key("siteTitleManifest"))
    # No trailing slash.
    site_url: str = field(metadata=_key("siteUrl"))
    site_language: str = field(metadata=_key("siteLanguage"))
    site_headline: str = field(metadata=_key("siteHeadline"))
    # og:image, relative to the static folder.
    site_banner: str = field(metadata=_key("siteBanner"))
    favicon: str = field(metadata=_key("favicon"))
    site_description: str = field(metadata=_key("siteDescription"))
    author: str = field(metadata=_key("author"))
    site_logo: str = field(metadata=_key("siteLogo"))

    site_fb_app_id: str | None = field(default=None, metadata=_key("siteFBAppID", optional=True))
    user_twitter: str | None = field(default=None, metadata=_key("userTwitter", optional=True))
    og_site_name: str | None = field(default=None, metadata=_key("ogSiteName", optional=True))
    og_language: str = field(metadata=_key("ogLanguage"))
    google_analytics_id: str | None = field(
        default=None, metadata=_key("googleAnalyticsID", optional=True)
    )

    # Web app manifest and progress bar colors.
    theme_color: str = field(metadata=_key("themeColor"))
    background_color: str = field(metadata=_key("backgroundColor"))

    @classmethod
    def keys(cls) -> list[str]:
        """Contract keys in declaration order."""

        return [f.metadata["key"] for f in fields(cls)]

    @classmethod
    def optional_keys(cls) -> list[str]:
        return [f.metadata["key"] for f in fields(cls) if f.metadata["optional"]]

    def to_dict(self) -> dict[str, str]:
        out: dict[str, str] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            out[f.metadata["key"]] = value
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, path: str = "") -> SiteConfig:
        """Build a record from a mapping keyed by contract keys.

        Raises:
            ConfigError: On unknown keys, missing required keys or non-string values.
        """

        def where(key: str) -> str:
            return f"{path}.{key}" if path else key

        known = set(cls.keys())
        unknown = sorted(str(k) for k in data if k not in known)
        if unknown:
            raise ConfigError(f"unknown keys: {', '.join(unknown)}", path=path or None)

        kwargs: dict[str, str | None] = {}
        for f in fields(cls):
            key = f.metadata["key"]
            value = data.get(key)

            # YAML reads unquoted IDs such as 123456789 as int.
            if isinstance(value, int) and not isinstance(value, bool):
                value = str(value)

            if f.metadata["optional"]:
                if value is None or value == "":
                    kwargs[f.name] = None
                    continue
                if not isinstance(value, str):
                    raise ConfigError("must be a string", path=where(key))
                kwargs[f.name] = value
                continue

            if value is None:
                raise ConfigError("missing required field", path=where(key))
            if not isinstance(value, str) or not value.strip():
                raise ConfigError("must be a non-empty string", path=where(key))
            kwargs[f.name] = value

        return cls(**kwargs)

    def to_json(self, *, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> SiteConfig:
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigError(f"invalid JSON: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError("JSON root must be an object")
        return cls.from_dict(raw)


SITE_CONFIG = SiteConfig(
    path_prefix="/",
    site_title="Happy Coding",
    site_title_alt="Happy Coding - Martin Anders",
    site_title_manifest="HappyCoding",
    site_url="https://happy-coding.dev",
    site_language="en",
    site_headline="Writing and publishing content",
    site_banner="/social/banner.jpg",
    favicon="src/favicon.png",
    site_description=(
        "Personal website of Martin Anders about frontend programming and other related stuff."
    ),
    author="Martin Anders",
    site_logo="/social/logo.png",
    user_twitter="@codeopfer",
    og_site_name="Happy Coding",
    og_language="en_US",
    google_analytics_id="UA-149176689-1",
    theme_color="#3498DB",
    background_color="#2b2e3c",
)
