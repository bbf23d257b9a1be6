"""Web Push transport built on ``pywebpush`` and VAPID credentials."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Mapping

from anyio import to_thread
from pywebpush import WebPushException, webpush
from requests.exceptions import RequestException

from app.config import Settings

logger = logging.getLogger(__name__)

# Status codes push services use for subscriptions that no longer exist.
GONE_STATUS_CODES = frozenset({404, 410})

SendStatus = Literal["ok", "gone", "error"]


@dataclass(frozen=True)
class SendResult:
    """Response of the push service for one message."""

    status: SendStatus
    detail: str | None = None

    @classmethod
    def ok(cls) -> "SendResult":
        return cls("ok")

    @classmethod
    def gone(cls, detail: str | None = None) -> "SendResult":
        return cls("gone", detail)

    @classmethod
    def error(cls, detail: str) -> "SendResult":
        return cls("error", detail)


def _response_status(exc: WebPushException) -> int | None:
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    return status_code if isinstance(status_code, int) else None


class WebPushSender:
    """Send encrypted messages to push services on behalf of the application."""

    def __init__(self, settings: Settings) -> None:
        self._private_key = settings.vapid_private_key
        self._subject = settings.vapid_subject
        self._timeout = settings.push_timeout_seconds

    async def send(
        self,
        address: str,
        key_material: Mapping[str, str],
        serialized_payload: str,
        ttl_seconds: int,
    ) -> SendResult:
        """Deliver ``serialized_payload`` to the subscription at ``address``."""

        if not self._private_key:
            logger.info("VAPID credentials not configured; skipping push delivery")
            return SendResult.error("VAPID credentials are not configured")

        subscription_info = {"endpoint": address, "keys": dict(key_material)}
        try:
            await to_thread.run_sync(
                self._send_blocking, subscription_info, serialized_payload, ttl_seconds
            )
        except WebPushException as exc:
            status_code = _response_status(exc)
            if status_code in GONE_STATUS_CODES:
                return SendResult.gone(f"status {status_code}")
            if status_code is not None:
                return SendResult.error(f"Push service responded with status {status_code}: {exc}")
            return SendResult.error(str(exc))
        except RequestException as exc:
            return SendResult.error(f"Push service unreachable: {exc}")
        return SendResult.ok()

    def _send_blocking(
        self, subscription_info: dict[str, object], data: str, ttl_seconds: int
    ) -> None:
        webpush(
            subscription_info=subscription_info,
            data=data,
            vapid_private_key=self._private_key,
            # pywebpush adds ``aud`` and ``exp`` to the claims it receives.
            vapid_claims={"sub": self._subject},
            ttl=ttl_seconds,
            timeout=self._timeout,
        )


__all__ = ["GONE_STATUS_CODES", "SendResult", "WebPushSender"]
