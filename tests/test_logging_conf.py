from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from snippet_scraper import logging_conf


def test_log_file_receives_json_events(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(logging_conf, "_LOGGING_INITIALISED", False)
    monkeypatch.delenv(logging_conf.LOG_LEVEL_ENV_VAR, raising=False)
    log_file = tmp_path / "logs" / "scrape.log"

    logger = logging_conf.configure_logging(verbose=False, log_file=log_file)
    logger.info("scrape_completed", target="https://a.test/", outcome="extracted")
    for handler in logging.getLogger("snippet_scraper").handlers:
        handler.flush()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert lines
    payload = json.loads(lines[-1])
    assert payload["target"] == "https://a.test/"
    assert "scrape_completed" in lines[-1]


def test_level_resolution(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(logging_conf.LOG_LEVEL_ENV_VAR, raising=False)
    assert logging_conf._resolve_level(False) == "WARNING"
    assert logging_conf._resolve_level(True) == "DEBUG"
    monkeypatch.setenv(logging_conf.LOG_LEVEL_ENV_VAR, "info")
    assert logging_conf._resolve_level(False) == "INFO"
