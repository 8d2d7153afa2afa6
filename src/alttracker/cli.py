from __future__ import annotations

import json
import sys
from dataclasses import asdict
from pathlib import Path

import typer

from .config import AppSettings, load_settings, resolve_env_file
from .core.clock import SystemClock
from .core.scheduler import TickScheduler
from .models.notification import Notification
from .notifications.payload import build_payload, format_payload, is_webhook_url
from .runtime.app import build_runtime
from .runtime.worker import TrackerWorker
from .sources.jsonl_feed import JsonlFeedSource


app = typer.Typer(add_completion=False, help="alttracker: mule coin balance notifier")


def _json_print(payload: object) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False, default=str))


def _describe_settings(settings: AppSettings) -> dict[str, object]:
    tracker = settings.tracker
    endpoint = tracker.endpoint
    if not endpoint:
        shape = None
    elif is_webhook_url(endpoint):
        shape = "webhook"
    else:
        shape = "generic"
    env_file = resolve_env_file()
    return {
        "env_file": str(env_file) if env_file else None,
        "enabled": tracker.enabled,
        "endpoint_configured": bool(endpoint),
        "payload_shape": shape,
        "mule_rsns": sorted(tracker.allowed_identities),
        "change_threshold": settings.gate.change_threshold,
        "cooldown_millis": settings.gate.cooldown_millis,
        "tick_interval_sec": settings.runtime.tick_interval_sec,
        "log_path": str(settings.logging.log_path),
    }


def _preview_notification(rsn: str, coins: int, clock: SystemClock) -> Notification:
    if coins < 0:
        raise typer.BadParameter("--coins must be non-negative")
    return Notification.from_millis(identity=rsn, total_value=coins, timestamp_millis=clock.now_millis())


@app.command()
def run(
    feed: str = typer.Option("-", help="JSON-lines sample feed path, '-' reads stdin"),
    max_ticks: int | None = typer.Option(None, min=1, help="Stop after N ticks"),
    pace: bool = typer.Option(True, "--pace/--no-pace", help="Sleep one tick interval between samples"),
) -> None:
    runtime = build_runtime()
    interval = runtime.settings.runtime.tick_interval_sec if pace else 0.0
    limit = max_ticks or runtime.settings.runtime.max_ticks
    try:
        if feed == "-":
            stream = sys.stdin
        else:
            path = Path(feed)
            if not path.is_file():
                raise typer.BadParameter(f"Feed file not found: {feed}")
            stream = path.open("r", encoding="utf-8")
        try:
            worker = TrackerWorker(
                tracker_service=runtime.tracker_service,
                source=JsonlFeedSource(stream, clock=runtime.clock, logger=runtime.logger),
                scheduler=TickScheduler(interval_sec=interval),
            )
            report = worker.run(max_ticks=limit)
        finally:
            if stream is not sys.stdin:
                stream.close()
        _json_print(asdict(report))
    finally:
        runtime.close(wait=True)


@app.command()
def preview(
    rsn: str = typer.Option(..., help="Account name to render"),
    coins: int = typer.Option(..., help="Total coins to render"),
    url: str | None = typer.Option(None, help="Destination URL (defaults to configured endpoint)"),
    send: bool = typer.Option(False, "--send", help="POST the payload once and report the result"),
) -> None:
    settings = load_settings()
    endpoint = (url if url is not None else settings.tracker.endpoint).strip()
    notification = _preview_notification(rsn, coins, SystemClock())
    if not send:
        _json_print({"endpoint": endpoint or None, "payload": build_payload(endpoint, notification)})
        return
    if not endpoint:
        raise typer.BadParameter("No endpoint configured; pass --url or set TRACKER__ENDPOINT_URL")
    runtime = build_runtime(settings)
    try:
        body, content_type = format_payload(endpoint, notification)
        delivered = runtime.sink.post_async(endpoint, body, content_type).result()
        _json_print({"endpoint": endpoint, "delivered": delivered})
    finally:
        runtime.close(wait=True)


@app.command()
def doctor() -> None:
    _json_print(_describe_settings(load_settings()))


if __name__ == "__main__":
    app()
