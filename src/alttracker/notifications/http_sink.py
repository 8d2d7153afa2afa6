from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from logging import Logger
from typing import Protocol

import requests

from ..config import DeliverySettings


class DeliverySink(Protocol):
    def post_async(self, url: str, body: str, content_type: str) -> Future[bool]: ...


class HttpDeliverySink:
    """Fire-and-forget JSON POSTs on a small worker pool.

    Failures are logged and swallowed; the returned future resolves to
    ``True`` only for a 2xx response. Nothing is retried.
    """

    _MAX_LOGGED_BODY_CHARS = 500

    def __init__(
        self,
        config: DeliverySettings,
        logger: Logger,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config
        self.logger = logger
        self.session = session or requests.Session()
        self._pool = ThreadPoolExecutor(max_workers=config.max_workers, thread_name_prefix="delivery")

    def post_async(self, url: str, body: str, content_type: str) -> Future[bool]:
        return self._pool.submit(self._post, url, body, content_type)

    def _post(self, url: str, body: str, content_type: str) -> bool:
        try:
            resp = self.session.post(
                url,
                data=body.encode("utf-8"),
                headers={"Content-Type": content_type},
                timeout=self.config.timeout_sec,
            )
        except requests.RequestException as exc:
            self.logger.warning(
                "delivery_error",
                extra={"event": {"type": exc.__class__.__name__, "detail": str(exc)}},
            )
            return False
        if not 200 <= resp.status_code < 300:
            self.logger.warning(
                "delivery_failed",
                extra={
                    "event": {
                        "code": resp.status_code,
                        "body": (resp.text or "")[: self._MAX_LOGGED_BODY_CHARS],
                    }
                },
            )
            return False
        self.logger.debug("delivery_ok", extra={"event": {"code": resp.status_code}})
        return True

    def close(self, *, wait: bool = False) -> None:
        # In-flight posts are never cancelled, only allowed to finish.
        self._pool.shutdown(wait=wait)
        if wait:
            self.session.close()
