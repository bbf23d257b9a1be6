"""Resolve the in-app destination opened when a notification is clicked."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import quote, urlencode

from app.domain.entities import NotificationType


@dataclass(frozen=True)
class FromData:
    """Query value taken from the notification ``data`` under ``key``."""

    key: str


QueryValue = str | FromData

# One row per notification type. Parameters keep their declared order and a
# ``FromData`` value missing from ``data`` drops its parameter.
DEEP_LINK_ROUTES: Mapping[str, tuple[tuple[str, QueryValue], ...]] = {
    NotificationType.JOB_POSTED.value: (
        ("view", "job"),
        ("id", FromData("job_id")),
    ),
    NotificationType.NEW_MESSAGE.value: (
        ("view", "chat"),
        ("user", FromData("sender_id")),
        ("job", FromData("job_id")),
    ),
    NotificationType.APPLICATION_ACCEPTED.value: (
        ("view", "job"),
        ("id", FromData("job_id")),
        ("tab", "application"),
    ),
    NotificationType.APPLICATION_REJECTED.value: (("view", "jobs"),),
}


def resolve_deep_link(
    notification_type: str, data: Mapping[str, Any] | None, base_url: str
) -> str:
    """Return the URL for ``notification_type``; unknown types get ``base_url``."""

    route = DEEP_LINK_ROUTES.get(notification_type)
    if route is None:
        return base_url

    values = data or {}
    query: list[tuple[str, str]] = []
    for name, value in route:
        if isinstance(value, FromData):
            raw = values.get(value.key)
            if raw is None or raw == "":
                continue
            value = str(raw)
        query.append((name, value))

    return f"{base_url.rstrip('/')}/?{urlencode(query, quote_via=quote)}"


__all__ = ["DEEP_LINK_ROUTES", "FromData", "resolve_deep_link"]
