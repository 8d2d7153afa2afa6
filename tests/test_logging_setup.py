from __future__ import annotations

import json
import logging

from alttracker.config import LoggingSettings
from alttracker.runtime.logging_setup import EventTextFormatter, JsonLineFormatter, setup_logging


def _record(msg: str, event: dict[str, object] | None = None) -> logging.LogRecord:
    record = logging.LogRecord("alttracker", logging.WARNING, __file__, 1, msg, None, None)
    if event is not None:
        record.event = event
    return record


def test_json_formatter_merges_event_fields() -> None:
    line = JsonLineFormatter().format(_record("delivery_failed", {"code": 502, "body": "bad\ngateway"}))
    payload = json.loads(line)
    assert payload["msg"] == "delivery_failed"
    assert payload["level"] == "WARNING"
    assert payload["code"] == 502


def test_text_formatter_appends_event_pairs() -> None:
    line = EventTextFormatter().format(_record("endpoint_missing", {"detail": "empty"}))
    assert line.endswith("endpoint_missing detail=empty")


def test_setup_logging_writes_rotating_file(tmp_path) -> None:
    cfg = LoggingSettings(log_dir=tmp_path / "logs", log_file="t.log", level="debug")
    logger = setup_logging(cfg, logger_name="alttracker_test_setup")
    logger.info("tracker_started")
    for handler in logger.handlers:
        handler.flush()
    assert logger.level == logging.DEBUG
    content = (tmp_path / "logs" / "t.log").read_text(encoding="utf-8")
    assert "tracker_started" in content
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_json_formatter_records_thread_and_stringifies_values(tmp_path) -> None:
    line = JsonLineFormatter().format(_record("feed_opened", {"path": tmp_path / "feed.jsonl"}))
    payload = json.loads(line)
    assert payload["thread"] == "MainThread"
    assert payload["path"] == str(tmp_path / "feed.jsonl")
