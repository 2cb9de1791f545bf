from __future__ import annotations

import os
from pathlib import Path

import pytest

from sitemeta.config import SITE_CONFIG, load_config, load_site_config, resolve_profile_configs
from sitemeta.core.errors import ConfigError


def _write(tmp_path: Path, text: str, name: str = "site.yaml") -> Path:
    p = tmp_path / name
    p.write_text(text.lstrip(), encoding="utf-8")
    return p


def test_load_config_expands_env_vars(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GA_ID", "G-ABC123")

    p = _write(
        tmp_path,
        """
site:
  googleAnalyticsID: ${GA_ID}
nested:
  arr:
    - id-${GA_ID}
""",
    )

    cfg = load_config(p, load_dotenv_file=False)
    assert cfg["site"]["googleAnalyticsID"] == "G-ABC123"
    assert cfg["nested"]["arr"][0] == "id-G-ABC123"


def test_load_config_missing_env_var_is_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GA_ID", raising=False)
    p = _write(tmp_path, "googleAnalyticsID: ${GA_ID}\n")

    with pytest.raises(ConfigError) as ei:
        load_config(p, load_dotenv_file=False)

    msg = str(ei.value)
    assert "GA_ID" in msg
    assert "missing" in msg
    assert "googleAnalyticsID" in msg


def test_load_config_empty_env_var_is_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GA_ID", "")
    p = _write(tmp_path, "googleAnalyticsID: ${GA_ID}\n")

    with pytest.raises(ConfigError) as ei:
        load_config(p, load_dotenv_file=False)

    assert "empty" in str(ei.value)


def test_load_config_reads_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SITEMETA_TEST_GA", raising=False)
    dotenv = tmp_path / ".env"
    dotenv.write_text("SITEMETA_TEST_GA=G-FROMENV\n", encoding="utf-8")
    p = _write(tmp_path, "googleAnalyticsID: ${SITEMETA_TEST_GA}\n")

    try:
        cfg = load_config(p, dotenv_path=dotenv)
    finally:
        os.environ.pop("SITEMETA_TEST_GA", None)

    assert cfg["googleAnalyticsID"] == "G-FROMENV"


def test_load_config_missing_file_is_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as ei:
        load_config(tmp_path / "nope.yaml", load_dotenv_file=False)

    assert "nope.yaml" in str(ei.value)


def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    p = _write(tmp_path, "- a\n- b\n")

    with pytest.raises(ConfigError):
        load_config(p, load_dotenv_file=False)


def test_load_config_later_files_win(tmp_path: Path) -> None:
    base = _write(tmp_path, "site:\n  siteTitle: A\n  author: X\n", name="a.yaml")
    over = _write(tmp_path, "site:\n  siteTitle: B\n", name="b.yaml")

    cfg = load_config([base, over], load_dotenv_file=False)

    assert cfg == {"site": {"siteTitle": "B", "author": "X"}}


def test_load_site_config_falls_back_to_shipped_values(tmp_path: Path) -> None:
    p = _write(tmp_path, "siteTitle: Other Site\n")

    site = load_site_config(p, load_dotenv_file=False)

    assert site.site_title == "Other Site"
    assert site.site_url == SITE_CONFIG.site_url


def test_load_site_config_null_clears_optional(tmp_path: Path) -> None:
    p = _write(tmp_path, "site:\n  userTwitter: null\n")

    site = load_site_config(p, load_dotenv_file=False)

    assert site.user_twitter is None
    assert "userTwitter" not in site.to_dict()


def test_load_site_config_error_carries_key_path(tmp_path: Path) -> None:
    p = _write(tmp_path, "site:\n  siteTitle: null\n")

    with pytest.raises(ConfigError) as ei:
        load_site_config(p, load_dotenv_file=False)

    assert ei.value.path == "site.siteTitle"


def test_shipped_site_yaml_matches_record(configs_dir: Path) -> None:
    site = load_site_config(configs_dir / "site.yaml", load_dotenv_file=False)
    assert site == SITE_CONFIG


def test_dev_profile_overrides(configs_dir: Path) -> None:
    files = resolve_profile_configs(profile="dev", configs_dir=configs_dir)

    site = load_site_config(files, load_dotenv_file=False)

    assert site.site_url == "http://localhost:8000"
    assert site.google_analytics_id is None
    assert site.site_title == SITE_CONFIG.site_title


def test_resolve_profile_configs(tmp_path: Path) -> None:
    assert resolve_profile_configs(profile="prod", configs_dir=tmp_path) == [tmp_path / "site.yaml"]
    assert resolve_profile_configs(profile="dev", configs_dir=tmp_path) == [
        tmp_path / "site.yaml",
        tmp_path / "dev.yaml",
    ]
    with pytest.raises(ConfigError):
        resolve_profile_configs(profile="staging", configs_dir=tmp_path)
