from __future__ import annotations

import json

from alttracker.models.notification import Notification
from alttracker.notifications.payload import JSON_CONTENT_TYPE, format_payload, is_webhook_url


WEBHOOK = "https://discord.com/api/webhooks/123/abc"
GENERIC = "https://wizards.example/api/mule-balance"


def _notification(total: int = 2_500_000) -> Notification:
    return Notification(identity="Mule1", total_value=total, timestamp="2026-01-02T03:04:05.000Z")


def test_destination_selection_rule() -> None:
    assert is_webhook_url(WEBHOOK) is True
    assert is_webhook_url(GENERIC) is False
    assert is_webhook_url("https://discord.com/channels/1") is False


def test_generic_payload_keeps_exact_integer() -> None:
    big = 2_147_483_647 * 3
    body, content_type = format_payload(GENERIC, _notification(big))
    assert content_type == JSON_CONTENT_TYPE
    payload = json.loads(body)
    assert set(payload) == {"rsn", "totalCoins", "timestamp"}
    assert payload["rsn"] == "Mule1"
    assert payload["totalCoins"] == big
    assert isinstance(payload["totalCoins"], int)
    assert payload["timestamp"] == "2026-01-02T03:04:05.000Z"


def test_webhook_payload_is_single_text_field() -> None:
    body, content_type = format_payload(WEBHOOK, _notification())
    assert content_type == JSON_CONTENT_TYPE
    payload = json.loads(body)
    assert list(payload) == ["content"]
    assert payload["content"] == (
        "**Mule Balance Update**\n"
        "`Mule1` now has **2,500,000** gp (inv + bank)\n"
        "`2026-01-02T03:04:05.000Z`"
    )
