from __future__ import annotations

import logging
from concurrent.futures import Future
from pathlib import Path

import pytest

from alttracker.config import AppSettings, LoggingSettings, TrackerSettings


class FakeSink:
    def __init__(self, *, result: bool = True) -> None:
        self.result = result
        self.calls: list[dict[str, str]] = []

    def post_async(self, url: str, body: str, content_type: str) -> Future[bool]:
        self.calls.append({"url": url, "body": body, "content_type": content_type})
        future: Future[bool] = Future()
        future.set_result(self.result)
        return future


class ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def messages(self) -> list[str]:
        return [record.getMessage() for record in self.records]


@pytest.fixture()
def log_handler() -> ListHandler:
    return ListHandler()


@pytest.fixture()
def logger(log_handler: ListHandler) -> logging.Logger:
    logger = logging.getLogger("test_alttracker")
    logger.handlers.clear()
    logger.addHandler(log_handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger


@pytest.fixture()
def fake_sink() -> FakeSink:
    return FakeSink()


@pytest.fixture()
def tracker_settings() -> TrackerSettings:
    return TrackerSettings(endpoint_url="https://example.test/api/mules")


@pytest.fixture()
def app_settings(tmp_path: Path) -> AppSettings:
    settings = AppSettings(_env_file=None)
    settings.logging = LoggingSettings(log_dir=tmp_path / "logs", jsonl=True)
    return settings
