from __future__ import annotations

from dataclasses import dataclass
from logging import Logger

from ..config import AppSettings, load_settings
from ..core.clock import SystemClock
from ..core.debounce import DebounceGate
from ..notifications.http_sink import HttpDeliverySink
from ..services.tracker_service import TrackerService
from .logging_setup import setup_logging


@dataclass(slots=True)
class RuntimeContainer:
    settings: AppSettings
    gate: DebounceGate
    sink: HttpDeliverySink
    tracker_service: TrackerService
    logger: Logger
    clock: SystemClock

    def close(self, *, wait: bool = True) -> None:
        self.sink.close(wait=wait)


def build_runtime(settings: AppSettings | None = None) -> RuntimeContainer:
    settings = settings or load_settings()
    logger = setup_logging(settings.logging)
    clock = SystemClock()

    gate = DebounceGate(
        change_threshold=settings.gate.change_threshold,
        cooldown_millis=settings.gate.cooldown_millis,
    )
    sink = HttpDeliverySink(settings.delivery, logger)
    tracker_service = TrackerService(
        config_fn=lambda: settings.tracker,
        gate=gate,
        sink=sink,
        logger=logger,
    )

    return RuntimeContainer(
        settings=settings,
        gate=gate,
        sink=sink,
        tracker_service=tracker_service,
        logger=logger,
        clock=clock,
    )
