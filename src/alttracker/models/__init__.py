from .game_state import SESSION_BOUNDARY_STATES, GameState
from .notification import Notification
from .observation import CoinItem, HostSample, Observation
from .tracker_state import UNSET, GatePhase, TrackerState

__all__ = [
    "CoinItem",
    "GatePhase",
    "GameState",
    "HostSample",
    "Notification",
    "Observation",
    "SESSION_BOUNDARY_STATES",
    "TrackerState",
    "UNSET",
]
