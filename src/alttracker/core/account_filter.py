from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol


class FilterConfig(Protocol):
    @property
    def enabled(self) -> bool: ...

    @property
    def allowed_identities(self) -> Iterable[str]: ...


def normalize_identity(name: str | None) -> str:
    if name is None:
        return ""
    return name.replace("\u00a0", " ").strip().casefold()


def parse_allowed_identities(raw: str | None) -> frozenset[str]:
    """Split a comma separated RSN list into normalized names; blanks are dropped."""
    if not raw:
        return frozenset()
    names = (normalize_identity(part) for part in raw.split(","))
    return frozenset(name for name in names if name)


def is_active(config: FilterConfig, current_identity: str | None) -> bool:
    if not config.enabled:
        return False
    local_name = normalize_identity(current_identity)
    if not local_name:
        return False
    allowed = {normalize_identity(name) for name in config.allowed_identities}
    allowed.discard("")
    if not allowed:
        return True
    return local_name in allowed
