from __future__ import annotations

import json
import logging

from sitemeta.observability.logging import JsonFormatter, get_logger


def test_json_formatter_inlines_extra_fields() -> None:
    record = logging.LogRecord(
        name="sitemeta.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="site_config_loaded",
        args=(),
        exc_info=None,
    )
    record.site_url = "https://happy-coding.dev"
    record.files = {"not", "json"}

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "sitemeta.test"
    assert payload["message"] == "site_config_loaded"
    assert payload["site_url"] == "https://happy-coding.dev"
    assert isinstance(payload["files"], str)


def test_kv_logger_passes_fields_as_extra(caplog) -> None:
    log = get_logger("sitemeta.test")

    with caplog.at_level(logging.INFO, logger="sitemeta.test"):
        log.info("hello", site_title="Happy Coding")

    assert caplog.records[-1].site_title == "Happy Coding"
