from __future__ import annotations

import time
from dataclasses import dataclass
from time import monotonic


@dataclass(slots=True)
class TickScheduler:
    """Paces the sampling loop at a fixed tick interval without drifting."""

    interval_sec: float
    ticks: int = 0
    _next_ts: float | None = None

    def start(self) -> None:
        self._next_ts = monotonic()
        self.ticks = 0

    def wait_for_tick(self) -> None:
        if self._next_ts is None:
            self.start()
        assert self._next_ts is not None
        self.ticks += 1
        if self.interval_sec <= 0:
            return
        self._next_ts += self.interval_sec
        remaining = self._next_ts - monotonic()
        if remaining > 0:
            time.sleep(remaining)
        else:
            # Fell behind; skip the missed ticks instead of bursting through them.
            self._next_ts = monotonic()
