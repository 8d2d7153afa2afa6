from __future__ import annotations

from alttracker.config import AppSettings, TrackerSettings


def test_defaults_match_plugin_configuration() -> None:
    settings = AppSettings(_env_file=None)
    assert settings.tracker.enabled is True
    assert settings.tracker.endpoint == ""
    assert settings.tracker.allowed_identities == frozenset()
    assert settings.gate.change_threshold == 1_000_000
    assert settings.gate.cooldown_millis == 5_000


def test_camel_case_keys_are_supported() -> None:
    tracker = TrackerSettings.model_validate(
        {"enabledForThisAccount": False, "endpointUrl": " https://x.test ", "muleRsns": "A,b"}
    )
    assert tracker.enabled is False
    assert tracker.endpoint == "https://x.test"
    assert tracker.allowed_identities == frozenset({"a", "b"})


def test_nested_env_keys_are_loaded(monkeypatch) -> None:
    monkeypatch.setenv("TRACKER__ENDPOINT_URL", "https://discord.com/api/webhooks/1/x")
    monkeypatch.setenv("GATE__COOLDOWN_MILLIS", "2500")
    settings = AppSettings(_env_file=None)
    assert settings.tracker.endpoint == "https://discord.com/api/webhooks/1/x"
    assert settings.gate.cooldown_millis == 2500


def test_none_endpoint_is_treated_as_empty() -> None:
    assert TrackerSettings(endpoint_url=None).endpoint == ""
