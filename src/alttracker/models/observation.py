from __future__ import annotations

from dataclasses import dataclass

from .game_state import GameState
from .notification import is_representable_millis


@dataclass(frozen=True, slots=True)
class Observation:
    total_value: int
    identity: str | None
    timestamp_millis: int

    @property
    def is_valid(self) -> bool:
        return self.total_value >= 0 and is_representable_millis(self.timestamp_millis)


@dataclass(frozen=True, slots=True)
class CoinItem:
    item_id: int
    quantity: int


@dataclass(frozen=True, slots=True)
class HostSample:
    """What the host hands over on one tick."""

    game_state: GameState
    observation: Observation | None = None
