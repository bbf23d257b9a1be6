"""Domain entities describing a push notification and its payload."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from types import MappingProxyType
from typing import Any, Mapping


class NotificationType(str, Enum):
    """Notification kinds with a dedicated deep link and action set."""

    JOB_POSTED = "job_posted"
    NEW_MESSAGE = "new_message"
    APPLICATION_ACCEPTED = "application_accepted"
    APPLICATION_REJECTED = "application_rejected"


def _freeze(data: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True)
class NotificationIntent:
    """What a caller wants to notify: kind, visible texts and auxiliary data."""

    type: str
    title: str
    body: str
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _freeze(self.data))


@dataclass(frozen=True)
class NotificationAction:
    """Interactive button displayed with the notification."""

    action: str
    title: str

    def to_wire(self) -> dict[str, str]:
        return {"action": self.action, "title": self.title}


@dataclass(frozen=True)
class NotificationPayload:
    """Message shared read-only by every delivery of a batch."""

    title: str
    body: str
    icon: str
    badge: str
    tag: str
    data: Mapping[str, Any]
    require_interaction: bool = False
    actions: tuple[NotificationAction, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _freeze(self.data))
        object.__setattr__(self, "actions", tuple(self.actions))

    @property
    def url(self) -> str | None:
        return self.data.get("url")

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON structure the service worker expects."""

        return {
            "title": self.title,
            "body": self.body,
            "icon": self.icon,
            "badge": self.badge,
            "tag": self.tag,
            "data": dict(self.data),
            "requireInteraction": self.require_interaction,
            "actions": [action.to_wire() for action in self.actions],
        }

    @cached_property
    def serialized(self) -> str:
        """JSON document sent to the push service, computed once."""

        return json.dumps(self.to_wire(), ensure_ascii=False, default=str)


__all__ = [
    "NotificationAction",
    "NotificationIntent",
    "NotificationPayload",
    "NotificationType",
]
