from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

from sitemeta.config import SITE_CONFIG, ConfigError, load_site_config, resolve_profile_configs
from sitemeta.observability.logging import configure_logging, get_logger


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sitemeta",
        description="Print the site metadata record for the static-site build.",
    )
    p.add_argument(
        "--config",
        action="append",
        default=None,
        help="YAML config path; repeat to layer overrides (later wins)",
    )
    p.add_argument("--profile", choices=["prod", "dev"], default=None, help="Load configs/<profile> files")
    p.add_argument("--configs-dir", default="configs", help="Directory holding site.yaml/dev.yaml")
    p.add_argument("--format", choices=["json", "yaml"], default="json", help="Output format")
    p.add_argument("--log-level", default="WARNING", help="Log level")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(level=args.log_level)
    log = get_logger("sitemeta.cli")

    try:
        if args.config:
            site = load_site_config([Path(c) for c in args.config])
        elif args.profile:
            site = load_site_config(
                resolve_profile_configs(profile=args.profile, configs_dir=Path(args.configs_dir))
            )
        else:
            site = SITE_CONFIG
    except ConfigError as e:
        log.error("config_error", error=str(e), key_path=e.path)
        print(f"sitemeta: {e}", file=sys.stderr)
        return 2

    if args.format == "yaml":
        sys.stdout.write(yaml.safe_dump(site.to_dict(), sort_keys=False, allow_unicode=True))
    else:
        sys.stdout.write(site.to_json() + "\n")
    return 0
