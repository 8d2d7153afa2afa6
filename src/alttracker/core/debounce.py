from __future__ import annotations

from dataclasses import dataclass, field

from ..models.notification import Notification
from ..models.observation import Observation
from ..models.tracker_state import UNSET, GatePhase, TrackerState


CHANGE_THRESHOLD = 1_000_000
COOLDOWN_MILLIS = 5_000


@dataclass(slots=True)
class GateDecision:
    notification: Notification | None
    previous: TrackerState
    diff: int | None = None

    @property
    def emitted(self) -> bool:
        return self.notification is not None

    @property
    def initial(self) -> bool:
        return self.emitted and self.previous.phase is GatePhase.UNINITIALIZED


@dataclass(slots=True)
class DebounceGate:
    """Decides when a coin total is worth reporting.

    The first valid observation of a session is always emitted. After that an
    observation is emitted only when it moved at least ``change_threshold``
    away from the last emitted value *and* at least ``cooldown_millis`` have
    passed since that emission. State advances at decision time, delivery
    results never feed back into it.
    """

    change_threshold: int = CHANGE_THRESHOLD
    cooldown_millis: int = COOLDOWN_MILLIS
    state: TrackerState = field(default_factory=TrackerState)

    @property
    def phase(self) -> GatePhase:
        return self.state.phase

    def reset(self) -> None:
        self.state = TrackerState()

    def observe(self, observation: Observation) -> Notification | None:
        return self.decide(observation).notification

    def decide(self, observation: Observation) -> GateDecision:
        previous = self.state
        if not observation.is_valid:
            return GateDecision(notification=None, previous=previous)

        if previous.last_sent_value == UNSET:
            return GateDecision(notification=self._emit(observation), previous=previous)

        diff = abs(observation.total_value - previous.last_sent_value)
        elapsed = observation.timestamp_millis - previous.last_sent_at_millis
        if diff >= self.change_threshold and elapsed >= self.cooldown_millis:
            return GateDecision(notification=self._emit(observation), previous=previous, diff=diff)
        return GateDecision(notification=None, previous=previous, diff=diff)

    def _emit(self, observation: Observation) -> Notification:
        notification = Notification.from_millis(
            identity=observation.identity or "Unknown",
            total_value=observation.total_value,
            timestamp_millis=observation.timestamp_millis,
        )
        self.state = TrackerState(
            last_sent_value=observation.total_value,
            last_sent_at_millis=observation.timestamp_millis,
        )
        return notification
