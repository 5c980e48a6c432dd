"""
Push notification service — Expo push API.

Delivery is best-effort: callers treat a failed send as something to
log, never as a reason to fail the request that triggered it.
"""

import logging
from typing import Any, Protocol

import httpx

from daiara.core.config import settings

logger = logging.getLogger(__name__)


class PushNotifier(Protocol):
    async def send(self, token: str, title: str, body: str, data: dict[str, Any]) -> None: ...


class ExpoPushNotifier:
    def __init__(
        self,
        url: str,
        timeout: float,
        disabled: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.timeout = timeout
        self.disabled = disabled
        self._transport = transport

    async def send(self, token: str, title: str, body: str, data: dict[str, Any]) -> None:
        """POST one message to Expo.  Raises httpx.HTTPError on failure."""
        if self.disabled:
            logger.info("Push disabled by configuration; skipping send")
            return

        message = {
            "to": token,
            "sound": "default",
            "title": title,
            "body": body,
            "data": data,
        }
        headers = {
            "Accept": "application/json",
            "Accept-Encoding": "gzip, deflate",
            "Content-Type": "application/json",
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            resp = await client.post(self.url, json=message, headers=headers)
            resp.raise_for_status()
        logger.info("Push notification accepted by Expo (%s)", title)


def get_push_notifier() -> PushNotifier:
    """FastAPI dependency — overridden in tests."""
    return ExpoPushNotifier(
        url=settings.PUSH_API_URL,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
        disabled=settings.PUSH_DISABLED,
    )
