from __future__ import annotations

from logging import Logger
from typing import Callable

from ..config import TrackerSettings
from ..core.account_filter import is_active
from ..core.debounce import DebounceGate
from ..models.game_state import SESSION_BOUNDARY_STATES, GameState
from ..models.notification import Notification
from ..models.observation import HostSample, Observation
from ..notifications.http_sink import DeliverySink
from ..notifications.payload import format_payload


class TrackerService:
    """Runs one observe/decide/deliver pass per host tick."""

    def __init__(
        self,
        *,
        config_fn: Callable[[], TrackerSettings],
        gate: DebounceGate,
        sink: DeliverySink,
        logger: Logger,
    ) -> None:
        self.config_fn = config_fn
        self.gate = gate
        self.sink = sink
        self.logger = logger

    def start(self) -> None:
        self.logger.info("tracker_started")
        self.gate.reset()

    def stop(self) -> None:
        self.logger.info("tracker_stopped")
        self.gate.reset()

    def on_game_state_changed(self, state: GameState) -> None:
        if state in SESSION_BOUNDARY_STATES:
            self.logger.debug("session_reset", extra={"event": {"state": state.value}})
            self.gate.reset()

    def on_sample(self, sample: HostSample) -> Notification | None:
        if sample.observation is None:
            return None
        return self.on_tick(sample.observation, game_state=sample.game_state)

    def on_tick(
        self,
        observation: Observation,
        *,
        game_state: GameState = GameState.LOGGED_IN,
    ) -> Notification | None:
        config = self.config_fn()
        if not is_active(config, observation.identity):
            return None
        if game_state is not GameState.LOGGED_IN:
            return None

        previous_value = self.gate.state.last_sent_value
        decision = self.gate.decide(observation)
        notification = decision.notification
        if notification is None:
            return None

        if decision.initial:
            self.logger.debug(
                "initial_total",
                extra={"event": {"rsn": notification.identity, "total": notification.total_value}},
            )
        else:
            self.logger.debug(
                "total_changed",
                extra={
                    "event": {
                        "old": previous_value,
                        "new": notification.total_value,
                        "diff": decision.diff,
                    }
                },
            )
        self._send(config.endpoint, notification)
        return notification

    def _send(self, endpoint: str, notification: Notification) -> None:
        if not endpoint:
            self.logger.warning(
                "endpoint_missing",
                extra={"event": {"detail": "endpoint URL is empty, cannot send balance update"}},
            )
            return
        body, content_type = format_payload(endpoint, notification)
        self.logger.debug("sending_payload", extra={"event": {"body": body}})
        # Result is intentionally not awaited; the sink logs its own failures.
        self.sink.post_async(endpoint, body, content_type)
