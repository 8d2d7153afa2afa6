from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


UNSET = -1


class GatePhase(StrEnum):
    UNINITIALIZED = "uninitialized"
    ARMED = "armed"


@dataclass(frozen=True, slots=True)
class TrackerState:
    last_sent_value: int = UNSET
    last_sent_at_millis: int = 0

    @property
    def phase(self) -> GatePhase:
        return GatePhase.UNINITIALIZED if self.last_sent_value == UNSET else GatePhase.ARMED
