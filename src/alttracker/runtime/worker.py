from __future__ import annotations

from dataclasses import dataclass, field

from ..core.scheduler import TickScheduler
from ..models.game_state import SESSION_BOUNDARY_STATES, GameState
from ..services.tracker_service import TrackerService
from ..sources.base import ObservationSource


@dataclass(slots=True)
class TickReport:
    ticks: int = 0
    emissions: int = 0
    session_resets: int = 0


@dataclass(slots=True)
class TrackerWorker:
    """Drives the tracker from a host sample stream, one sample per tick."""

    tracker_service: TrackerService
    source: ObservationSource
    scheduler: TickScheduler
    _game_state: GameState = field(default=GameState.UNKNOWN)

    def run(self, *, max_ticks: int | None = None) -> TickReport:
        report = TickReport()
        self.tracker_service.start()
        self.scheduler.start()
        try:
            for sample in self.source.samples():
                if sample.game_state is not self._game_state:
                    self._game_state = sample.game_state
                    self.tracker_service.on_game_state_changed(sample.game_state)
                    if sample.game_state in SESSION_BOUNDARY_STATES:
                        report.session_resets += 1
                if self.tracker_service.on_sample(sample) is not None:
                    report.emissions += 1
                report.ticks += 1
                if max_ticks is not None and report.ticks >= max_ticks:
                    break
                self.scheduler.wait_for_tick()
        finally:
            self.tracker_service.stop()
        return report
