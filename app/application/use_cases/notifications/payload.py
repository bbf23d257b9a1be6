"""Build the notification payload shared by every delivery of a batch."""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities import (
    NotificationAction,
    NotificationIntent,
    NotificationPayload,
    NotificationType,
)

from .deep_links import resolve_deep_link


@dataclass(frozen=True)
class NotificationProfile:
    """Presentation options attached to a notification type."""

    actions: tuple[NotificationAction, ...] = ()
    require_interaction: bool = False


DEFAULT_PROFILE = NotificationProfile()

NOTIFICATION_PROFILES: dict[str, NotificationProfile] = {
    NotificationType.NEW_MESSAGE.value: NotificationProfile(
        actions=(NotificationAction(action="open", title="Abrir chat"),),
    ),
    NotificationType.JOB_POSTED.value: NotificationProfile(
        actions=(NotificationAction(action="view", title="Ver oferta"),),
    ),
    NotificationType.APPLICATION_ACCEPTED.value: NotificationProfile(
        actions=(NotificationAction(action="view", title="Ver detalles"),),
        require_interaction=True,
    ),
}


def get_notification_profile(notification_type: str) -> NotificationProfile:
    return NOTIFICATION_PROFILES.get(notification_type, DEFAULT_PROFILE)


def build_notification_payload(
    intent: NotificationIntent,
    *,
    base_url: str,
    icon: str,
    badge: str,
) -> NotificationPayload:
    """Return the payload for ``intent`` with its deep link already resolved."""

    profile = get_notification_profile(intent.type)
    data = {
        **intent.data,
        "url": resolve_deep_link(intent.type, intent.data, base_url),
        "type": intent.type,
    }
    return NotificationPayload(
        title=intent.title,
        body=intent.body,
        icon=icon,
        badge=badge,
        tag=intent.type,
        data=data,
        require_interaction=profile.require_interaction,
        actions=profile.actions,
    )


__all__ = [
    "NOTIFICATION_PROFILES",
    "NotificationProfile",
    "build_notification_payload",
    "get_notification_profile",
]
