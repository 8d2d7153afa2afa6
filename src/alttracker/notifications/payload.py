from __future__ import annotations

import json

from ..models.notification import Notification


JSON_CONTENT_TYPE = "application/json; charset=utf-8"
WEBHOOK_URL_MARKER = "discord.com/api/webhooks"

WEBHOOK_TEMPLATE = "**Mule Balance Update**\n`{rsn}` now has **{amount}** gp (inv + bank)\n`{timestamp}`"


def is_webhook_url(endpoint_url: str) -> bool:
    return WEBHOOK_URL_MARKER in endpoint_url


def build_payload(endpoint_url: str, notification: Notification) -> dict[str, object]:
    if is_webhook_url(endpoint_url):
        content = WEBHOOK_TEMPLATE.format(
            rsn=notification.identity,
            amount=f"{notification.total_value:,}",
            timestamp=notification.timestamp,
        )
        return {"content": content}
    return {
        "rsn": notification.identity,
        "totalCoins": notification.total_value,
        "timestamp": notification.timestamp,
    }


def format_payload(endpoint_url: str, notification: Notification) -> tuple[str, str]:
    """Render ``notification`` for ``endpoint_url`` as ``(body, content_type)``.

    Chat webhooks get a human readable message in a ``content`` field, any
    other endpoint gets the structured ``rsn``/``totalCoins``/``timestamp`` object.
    """
    payload = build_payload(endpoint_url, notification)
    body = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return body, JSON_CONTENT_TYPE
