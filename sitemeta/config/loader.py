from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Sequence

import yaml
from dotenv import load_dotenv

from sitemeta.config.model import SITE_CONFIG, SiteConfig
from sitemeta.core.errors import ConfigError
from sitemeta.observability.logging import get_logger


_ENV_PLACEHOLDER_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

log = get_logger("sitemeta.config")


@dataclass(frozen=True, slots=True)
class _UnresolvedEnvRef:
    """An unresolved ${ENV_VAR} reference, kept for the error report."""

    var_name: str
    source_file: str
    key_path: str
    reason: str  # "missing" | "empty"


def _deep_merge(base: MutableMapping[str, Any], overlay: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """Deep-merge two mappings.

    - Dicts are merged recursively.
    - Other values (including None) are replaced.
    """

    for k, v in overlay.items():
        if isinstance(v, Mapping) and isinstance(base.get(k), Mapping):
            base[k] = _deep_merge(dict(base[k]), v)  # type: ignore[arg-type]
        else:
            base[k] = v
    return base


def _load_yaml(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    return yaml.safe_load(text)


def _expand_env_in_obj(
    obj: Any,
    *,
    source_file: str,
    key_path: str,
    unresolved: list[_UnresolvedEnvRef],
) -> Any:
    if isinstance(obj, str):
        def repl(match: re.Match[str]) -> str:
            name = match.group(1)
            value = os.getenv(name)
            if value is None or value == "":
                unresolved.append(
                    _UnresolvedEnvRef(
                        var_name=name,
                        source_file=source_file,
                        key_path=key_path,
                        reason="missing" if value is None else "empty",
                    )
                )
                return match.group(0)
            return value

        return _ENV_PLACEHOLDER_RE.sub(repl, obj)

    if isinstance(obj, Mapping):
        out: dict[str, Any] = {}
        for k, v in obj.items():
            child_path = f"{key_path}.{k}" if key_path else str(k)
            out[str(k)] = _expand_env_in_obj(
                v,
                source_file=source_file,
                key_path=child_path,
                unresolved=unresolved,
            )
        return out

    if isinstance(obj, list):
        return [
            _expand_env_in_obj(
                v,
                source_file=source_file,
                key_path=f"{key_path}[{i}]" if key_path else f"[{i}]",
                unresolved=unresolved,
            )
            for i, v in enumerate(obj)
        ]

    return obj


def load_config(
    paths: Path | Sequence[Path],
    *,
    load_dotenv_file: bool = True,
    dotenv_path: Path | None = None,
) -> dict[str, Any]:
    """Load YAML config files with strict ${ENV_VAR} expansion.

    Args:
        paths: One or more YAML files. When multiple are provided, they are merged
            (later files override earlier ones).
        load_dotenv_file: Whether to load a .env file before expansion.
        dotenv_path: Optional explicit .env path. When omitted, a `.env` in the
            current working directory is used if present.

    Raises:
        ConfigError: If a file is missing or invalid, or env expansion is unresolved.
    """

    file_list: list[Path] = [Path(paths)] if isinstance(paths, (str, Path)) else [Path(p) for p in paths]
    if not file_list:
        raise ConfigError("No config files provided")

    if load_dotenv_file:
        # Already-set environment variables win over .env.
        load_dotenv(dotenv_path or Path.cwd() / ".env", override=False)

    merged: dict[str, Any] = {}
    for p in file_list:
        if not p.exists():
            raise ConfigError("config file not found", path=str(p))
        try:
            fragment = _load_yaml(p)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to read YAML config: {e}", path=str(p)) from e

        if fragment is None:
            fragment = {}

        if not isinstance(fragment, Mapping):
            raise ConfigError("top-level YAML must be a mapping", path=str(p))

        merged = _deep_merge(merged, fragment)  # type: ignore[arg-type]

    unresolved: list[_UnresolvedEnvRef] = []
    expanded = _expand_env_in_obj(
        merged,
        source_file=",".join(str(p) for p in file_list),
        key_path="",
        unresolved=unresolved,
    )

    if unresolved:
        lines: list[str] = ["Unresolved environment variables in config:"]
        for ref in unresolved:
            where = ref.key_path or "<root>"
            lines.append(f"- {ref.var_name} ({ref.reason}) at {where} in {ref.source_file}")
        raise ConfigError("\n".join(lines))

    return expanded


def load_site_config(
    paths: Path | Sequence[Path],
    *,
    load_dotenv_file: bool = True,
    dotenv_path: Path | None = None,
) -> SiteConfig:
    """Load the site record from YAML.

    Keys may sit at the top level or under a `site:` mapping. Keys the files do
    not mention keep the values of `SITE_CONFIG`; an explicit `null` clears an
    optional field.
    """

    raw = load_config(paths, load_dotenv_file=load_dotenv_file, dotenv_path=dotenv_path)

    path = ""
    if "site" in raw:
        if len(raw) != 1:
            raise ConfigError("`site` must be the only top-level key when present")
        raw = raw["site"]
        path = "site"
        if not isinstance(raw, Mapping):
            raise ConfigError("must be a mapping", path=path)

    data = _deep_merge(SITE_CONFIG.to_dict(), raw)
    site = SiteConfig.from_dict(data, path=path)

    log.debug(
        "site_config_loaded",
        files=[str(p) for p in ([paths] if isinstance(paths, (str, Path)) else paths)],
        site_url=site.site_url,
    )
    return site


def resolve_profile_configs(*, profile: str, configs_dir: Path) -> list[Path]:
    """Resolve the config file list for a build profile.

    - profile=prod -> [configs/site.yaml]
    - profile=dev  -> [configs/site.yaml, configs/dev.yaml]
    """

    if profile == "prod":
        return [configs_dir / "site.yaml"]
    if profile == "dev":
        return [configs_dir / "site.yaml", configs_dir / "dev.yaml"]
    raise ConfigError(f"Unknown profile: {profile}")
