from __future__ import annotations

from enum import StrEnum


class GameState(StrEnum):
    UNKNOWN = "UNKNOWN"
    LOGIN_SCREEN = "LOGIN_SCREEN"
    LOGGING_IN = "LOGGING_IN"
    LOADING = "LOADING"
    LOGGED_IN = "LOGGED_IN"
    CONNECTION_LOST = "CONNECTION_LOST"
    HOPPING = "HOPPING"

    @classmethod
    def parse(cls, value: str | None) -> GameState:
        if value is None:
            return cls.LOGGED_IN
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return cls.UNKNOWN


# Abrupt disconnects (CONNECTION_LOST) intentionally keep the last sent total.
SESSION_BOUNDARY_STATES = frozenset({GameState.LOGIN_SCREEN, GameState.HOPPING})
