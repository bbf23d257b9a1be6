"""Tests for the outcome classification of single deliveries."""

from __future__ import annotations

import asyncio
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.config import Settings
from app.domain.entities import (
    Delivered,
    Expired,
    Failed,
    NotificationPayload,
    PushEndpoint,
)
from app.infrastructure.notifications import SendResult, WebPushDeliveryAdapter
from app.infrastructure.notifications.delivery import INCOMPLETE_ENDPOINT_ERROR

ENDPOINT = PushEndpoint(address="https://push.example/abc", p256dh="p256dh", auth="auth")
PAYLOAD = NotificationPayload(
    title="Hola",
    body="Tienes un mensaje",
    icon="/favicon.svg",
    badge="/favicon.svg",
    tag="new_message",
    data={"url": "https://extrahostelero.com/?view=chat&user=1", "type": "new_message"},
)


class RecordingSender:
    def __init__(self, result=None, error: Exception | None = None) -> None:
        self.result = result or SendResult.ok()
        self.error = error
        self.calls = []

    async def send(self, address, key_material, serialized_payload, ttl_seconds):
        self.calls.append(
            {
                "address": address,
                "keys": dict(key_material),
                "payload": serialized_payload,
                "ttl": ttl_seconds,
            }
        )
        if self.error is not None:
            raise self.error
        return self.result


def _deliver(sender, endpoint=ENDPOINT, **settings_overrides):
    settings = Settings(database_url="sqlite://", **settings_overrides)
    adapter = WebPushDeliveryAdapter(settings, sender)
    return asyncio.run(adapter.deliver(endpoint, PAYLOAD))


def test_success_is_delivered_and_uses_configured_ttl():
    sender = RecordingSender()

    outcome = _deliver(sender, push_ttl_seconds=3600)

    assert outcome == Delivered(ENDPOINT)
    assert sender.calls == [
        {
            "address": ENDPOINT.address,
            "keys": {"p256dh": "p256dh", "auth": "auth"},
            "payload": PAYLOAD.serialized,
            "ttl": 3600,
        }
    ]


def test_default_ttl_is_one_day():
    sender = RecordingSender()

    _deliver(sender)

    assert sender.calls[0]["ttl"] == 86400


def test_gone_response_is_expired(caplog):
    with caplog.at_level("WARNING"):
        outcome = _deliver(RecordingSender(SendResult.gone("status 410")))

    assert outcome == Expired(ENDPOINT)
    assert "Expired subscription" in caplog.text


def test_error_response_is_failed_with_detail():
    outcome = _deliver(RecordingSender(SendResult.error("status 401")))

    assert outcome == Failed(ENDPOINT, "status 401")


def test_raised_error_is_failed_instead_of_propagating():
    outcome = _deliver(RecordingSender(error=ConnectionError("reset by peer")))

    assert isinstance(outcome, Failed)
    assert outcome.error == "reset by peer"


def test_incomplete_endpoint_fails_without_sending():
    sender = RecordingSender()
    endpoint = PushEndpoint(address="", p256dh="p256dh", auth="auth")

    outcome = _deliver(sender, endpoint=endpoint)

    assert outcome == Failed(endpoint, INCOMPLETE_ENDPOINT_ERROR)
    assert sender.calls == []
