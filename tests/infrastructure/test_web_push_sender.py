"""Tests for the pywebpush based transport."""

from __future__ import annotations

import asyncio
from pathlib import Path
import sys
import types

import pytest
from pywebpush import WebPushException
from requests.exceptions import ConnectionError as RequestsConnectionError

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.config import Settings
from app.infrastructure.notifications import web_push as web_push_module
from app.infrastructure.notifications.web_push import SendResult, WebPushSender

ADDRESS = "https://fcm.googleapis.com/fcm/send/abc"
KEYS = {"p256dh": "p256dh", "auth": "auth"}


def _sender(**overrides) -> WebPushSender:
    values = {
        "database_url": "sqlite://",
        "vapid_public_key": "public",
        "vapid_private_key": "private",
    }
    values.update(overrides)
    return WebPushSender(Settings(**values))


def _send(sender: WebPushSender) -> SendResult:
    return asyncio.run(sender.send(ADDRESS, KEYS, '{"title": "Hola"}', 86400))


def _raise_with_status(status_code: int):
    def fake_webpush(**kwargs):
        raise WebPushException(
            f"Push failed: {status_code}",
            response=types.SimpleNamespace(status_code=status_code),
        )

    return fake_webpush


def test_successful_send_passes_subscription_and_vapid_claims(monkeypatch):
    calls = []

    def fake_webpush(**kwargs):
        calls.append(kwargs)

    monkeypatch.setattr(web_push_module, "webpush", fake_webpush)

    result = _send(_sender(push_timeout_seconds=5))

    assert result == SendResult.ok()
    assert calls == [
        {
            "subscription_info": {"endpoint": ADDRESS, "keys": KEYS},
            "data": '{"title": "Hola"}',
            "vapid_private_key": "private",
            "vapid_claims": {"sub": "mailto:contact@extrahostelero.com"},
            "ttl": 86400,
            "timeout": 5,
        }
    ]


@pytest.mark.parametrize("status_code", [404, 410])
def test_not_found_and_gone_are_reported_as_gone(monkeypatch, status_code):
    monkeypatch.setattr(web_push_module, "webpush", _raise_with_status(status_code))

    assert _send(_sender()).status == "gone"


def test_other_status_codes_are_errors(monkeypatch):
    monkeypatch.setattr(web_push_module, "webpush", _raise_with_status(413))

    result = _send(_sender())

    assert result.status == "error"
    assert "413" in result.detail


def test_network_failures_are_errors(monkeypatch):
    def fake_webpush(**kwargs):
        raise RequestsConnectionError("connection refused")

    monkeypatch.setattr(web_push_module, "webpush", fake_webpush)

    result = _send(_sender())

    assert result.status == "error"
    assert "connection refused" in result.detail


def test_missing_vapid_credentials_skip_the_network(monkeypatch):
    def fake_webpush(**kwargs):  # pragma: no cover - must not be called
        raise AssertionError("webpush should not be called")

    monkeypatch.setattr(web_push_module, "webpush", fake_webpush)

    result = _send(_sender(vapid_public_key=None, vapid_private_key=None))

    assert result.status == "error"
    assert "VAPID" in result.detail
