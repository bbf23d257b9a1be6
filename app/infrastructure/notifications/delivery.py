"""Deliver one notification payload to one endpoint and classify the result."""

from __future__ import annotations

import logging
from typing import Mapping, Protocol

from app.config import Settings
from app.domain.entities import (
    Delivered,
    DeliveryOutcome,
    Expired,
    Failed,
    NotificationPayload,
    PushEndpoint,
)

from .web_push import SendResult

logger = logging.getLogger(__name__)

INCOMPLETE_ENDPOINT_ERROR = "Subscription is missing its endpoint URL or encryption keys"


class PushSender(Protocol):
    async def send(
        self,
        address: str,
        key_material: Mapping[str, str],
        serialized_payload: str,
        ttl_seconds: int,
    ) -> SendResult:
        ...


class WebPushDeliveryAdapter:
    """Turn push service responses into :class:`DeliveryOutcome` values."""

    def __init__(self, settings: Settings, sender: PushSender) -> None:
        self._sender = sender
        self._ttl_seconds = settings.push_ttl_seconds

    async def deliver(
        self, endpoint: PushEndpoint, payload: NotificationPayload
    ) -> DeliveryOutcome:
        if not endpoint.is_complete:
            return Failed(endpoint, INCOMPLETE_ENDPOINT_ERROR)

        try:
            result = await self._sender.send(
                endpoint.address,
                endpoint.key_material,
                payload.serialized,
                self._ttl_seconds,
            )
        except Exception as exc:
            logger.exception("Push send error for %s", endpoint.address)
            return Failed(endpoint, str(exc) or exc.__class__.__name__)

        if result.status == "ok":
            return Delivered(endpoint)
        if result.status == "gone":
            logger.warning("Expired subscription: %s", endpoint.address)
            return Expired(endpoint)
        return Failed(endpoint, result.detail or "Unknown push delivery error")


__all__ = ["INCOMPLETE_ENDPOINT_ERROR", "PushSender", "WebPushDeliveryAdapter"]
