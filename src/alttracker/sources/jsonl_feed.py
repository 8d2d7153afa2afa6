from __future__ import annotations

import json
from collections.abc import Iterator
from logging import Logger
from typing import Any, TextIO

from ..core.clock import Clock
from ..models.game_state import GameState
from ..models.observation import CoinItem, HostSample, Observation
from ..models.notification import is_representable_millis
from .coins import total_coins


class FeedLineError(ValueError):
    pass


class JsonlFeedSource:
    """Replays host samples written one JSON object per line.

    Recognised keys: ``state`` (game state name, defaults to LOGGED_IN),
    ``rsn``, ``total_coins`` or ``inventory``/``bank`` item lists, and an
    optional ``ts`` in epoch millis.
    """

    def __init__(self, stream: TextIO, *, clock: Clock, logger: Logger) -> None:
        self.stream = stream
        self.clock = clock
        self.logger = logger

    def samples(self) -> Iterator[HostSample]:
        for line_no, line in enumerate(self.stream, start=1):
            text = line.strip()
            if not text:
                continue
            try:
                yield self.parse_line(text)
            except FeedLineError as exc:
                self.logger.warning(
                    "feed_line_skipped",
                    extra={"event": {"line": line_no, "detail": str(exc)}},
                )

    def parse_line(self, text: str) -> HostSample:
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise FeedLineError(f"invalid json: {exc.msg}") from exc
        if not isinstance(payload, dict):
            raise FeedLineError("expected a json object")

        state = GameState.parse(payload.get("state"))
        if state is not GameState.LOGGED_IN:
            return HostSample(game_state=state)

        ts = payload.get("ts")
        if ts is None:
            ts = self.clock.now_millis()
        timestamp_millis = self._as_int(ts, "ts")
        if not is_representable_millis(timestamp_millis):
            raise FeedLineError("ts is outside the representable date range")
        rsn = payload.get("rsn")
        observation = Observation(
            total_value=self._total(payload),
            identity=str(rsn) if rsn is not None else None,
            timestamp_millis=timestamp_millis,
        )
        return HostSample(game_state=state, observation=observation)

    def _total(self, payload: dict[str, Any]) -> int:
        if "total_coins" in payload:
            return self._as_int(payload["total_coins"], "total_coins")
        inventory = self._items(payload.get("inventory"), "inventory")
        bank = self._items(payload.get("bank"), "bank")
        if inventory is None and bank is None:
            raise FeedLineError("sample has neither total_coins nor inventory/bank")
        return total_coins(inventory, bank)

    def _items(self, raw: object, name: str) -> list[CoinItem | None] | None:
        if raw is None:
            return None
        if not isinstance(raw, list):
            raise FeedLineError(f"{name} must be a list")
        items: list[CoinItem | None] = []
        for entry in raw:
            if entry is None:
                items.append(None)
                continue
            if not isinstance(entry, dict):
                raise FeedLineError(f"{name} entries must be objects")
            items.append(
                CoinItem(
                    item_id=self._as_int(entry.get("id"), f"{name}.id"),
                    quantity=self._as_int(entry.get("quantity", 1), f"{name}.quantity"),
                )
            )
        return items

    @staticmethod
    def _as_int(value: object, name: str) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise FeedLineError(f"{name} must be an integer")
        try:
            return int(value)
        except (ValueError, OverflowError) as exc:
            raise FeedLineError(f"{name} must be an integer") from exc
