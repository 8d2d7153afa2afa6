from __future__ import annotations

from datetime import UTC, datetime, timedelta

from pydantic import BaseModel, ConfigDict


class Notification(BaseModel):
    model_config = ConfigDict(frozen=True)

    identity: str
    total_value: int
    timestamp: str

    @classmethod
    def from_millis(cls, *, identity: str, total_value: int, timestamp_millis: int) -> Notification:
        return cls(identity=identity, total_value=total_value, timestamp=iso_timestamp(timestamp_millis))


_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MILLI = timedelta(milliseconds=1)
MIN_TIMESTAMP_MILLIS = (datetime(1, 1, 1, tzinfo=UTC) - _EPOCH) // _ONE_MILLI
MAX_TIMESTAMP_MILLIS = (datetime(9999, 12, 31, 23, 59, 59, 999000, tzinfo=UTC) - _EPOCH) // _ONE_MILLI


def is_representable_millis(timestamp_millis: int) -> bool:
    return MIN_TIMESTAMP_MILLIS <= timestamp_millis <= MAX_TIMESTAMP_MILLIS


def iso_timestamp(timestamp_millis: int) -> str:
    dt = _EPOCH + timedelta(milliseconds=timestamp_millis)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
