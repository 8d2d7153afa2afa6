"""Payload formatting and HTTP delivery for balance updates."""

from .http_sink import DeliverySink, HttpDeliverySink
from .payload import JSON_CONTENT_TYPE, WEBHOOK_URL_MARKER, format_payload, is_webhook_url

__all__ = [
    "DeliverySink",
    "HttpDeliverySink",
    "JSON_CONTENT_TYPE",
    "WEBHOOK_URL_MARKER",
    "format_payload",
    "is_webhook_url",
]
