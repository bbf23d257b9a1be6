"""Domain entities exposed by the application."""

from .batch_summary import BatchSummary
from .delivery import Delivered, DeliveryOutcome, Expired, Failed
from .notification import (
    NotificationAction,
    NotificationIntent,
    NotificationPayload,
    NotificationType,
)
from .push_endpoint import PushEndpoint

__all__ = [
    "BatchSummary",
    "Delivered",
    "DeliveryOutcome",
    "Expired",
    "Failed",
    "NotificationAction",
    "NotificationIntent",
    "NotificationPayload",
    "NotificationType",
    "PushEndpoint",
]
