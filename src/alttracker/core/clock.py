from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol


class Clock(Protocol):
    def now_millis(self) -> int:
        ...


def epoch_millis(dt: datetime) -> int:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return int(dt.timestamp() * 1000)


@dataclass(slots=True)
class SystemClock:
    def now_millis(self) -> int:
        return epoch_millis(datetime.now(tz=UTC))


@dataclass(slots=True)
class FrozenClock:
    current_millis: int = 0

    def now_millis(self) -> int:
        return self.current_millis

    def advance(self, millis: int) -> None:
        self.current_millis += millis
