from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from ..models.observation import HostSample


class ObservationSource(Protocol):
    def samples(self) -> Iterator[HostSample]: ...
