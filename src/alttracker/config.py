from __future__ import annotations

import os
from pathlib import Path

from pydantic import AliasChoices, BaseModel, Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.account_filter import parse_allowed_identities


class LoggingSettings(BaseModel):
    level: str = "INFO"
    jsonl: bool = True
    log_dir: Path = Path("tracker_data/logs")
    log_file: str = "alttracker.log"
    max_bytes: int = 2 * 1024 * 1024
    backup_count: int = 3

    @property
    def log_path(self) -> Path:
        return self.log_dir / self.log_file


class TrackerSettings(BaseModel):
    enabled_for_this_account: bool = Field(
        default=True,
        validation_alias=AliasChoices("enabled_for_this_account", "enabledForThisAccount", "enabled"),
    )
    endpoint_url: str = Field(default="", validation_alias=AliasChoices("endpoint_url", "endpointUrl"))
    mule_rsns: str = Field(default="", validation_alias=AliasChoices("mule_rsns", "muleRsns"))

    @field_validator("endpoint_url", "mule_rsns", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    @property
    def enabled(self) -> bool:
        return self.enabled_for_this_account

    @property
    def endpoint(self) -> str:
        return self.endpoint_url.strip()

    @property
    def allowed_identities(self) -> frozenset[str]:
        return parse_allowed_identities(self.mule_rsns)


class GateSettings(BaseModel):
    change_threshold: PositiveInt = 1_000_000
    cooldown_millis: int = Field(default=5_000, ge=0)


class DeliverySettings(BaseModel):
    timeout_sec: float = 10.0
    max_workers: PositiveInt = 2


class RuntimeSettings(BaseModel):
    tick_interval_sec: float = Field(default=0.6, ge=0.0)
    max_ticks: PositiveInt | None = None


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        frozen=False,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    tracker: TrackerSettings = Field(default_factory=TrackerSettings)
    gate: GateSettings = Field(default_factory=GateSettings)
    delivery: DeliverySettings = Field(default_factory=DeliverySettings)
    runtime: RuntimeSettings = Field(default_factory=RuntimeSettings)

    def ensure_runtime_dirs(self) -> None:
        self.logging.log_dir.mkdir(parents=True, exist_ok=True)


def load_settings() -> AppSettings:
    env_file = resolve_env_file()
    settings = AppSettings(_env_file=env_file) if env_file else AppSettings()
    settings.ensure_runtime_dirs()
    return settings


def resolve_env_file() -> Path | None:
    """Resolve a deterministic .env file path for local and service runs."""
    candidates: list[Path] = []
    explicit = os.getenv("ALTTRACKER_ENV_FILE")
    if explicit:
        candidates.append(Path(explicit).expanduser())

    candidates.append(Path.cwd() / ".env")
    candidates.append(Path(__file__).resolve().parents[2] / ".env")

    seen: set[str] = set()
    for path in candidates:
        resolved = path.resolve()
        key = str(resolved)
        if key in seen:
            continue
        seen.add(key)
        if resolved.is_file():
            return resolved
    return None
